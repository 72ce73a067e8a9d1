"""
Admin API Key Authentication

Validates admin API keys for the organization management endpoints.
"""

from fastapi import Header, status
from src.api.error import ClientError
from src.app.errors import AppError
from config import ApplicationConfig


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    Provisioning is called by internal services (signup flow, billing),
    not by end users, so it is guarded by a service-to-service key.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            AppError("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    valid_admin_key = getattr(ApplicationConfig, "ADMIN_API_KEY", "test-admin-key-12345")

    if x_admin_api_key != valid_admin_key:
        raise ClientError(
            AppError("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
