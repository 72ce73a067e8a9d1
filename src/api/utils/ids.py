from uuid import UUID

from fastapi import status

from src.api.error import ClientError
from src.app.errors import AppError


def parse_uuid(value: str, code: str, label: str) -> UUID:
    """Parse a path/body identifier, failing with 400 on malformed input"""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            AppError(code, f"Invalid {label} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
