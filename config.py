import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./orgs.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    # Slug is held as metadata.requested_slug until billing promotes it
    IS_TEAM_BILLING_ENABLED = bool(data.get("IS_TEAM_BILLING_ENABLED", False))
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    EMAIL_FROM = data.get("EMAIL_FROM", "noreply@example.com")
    WEBAPP_URL = data.get("WEBAPP_URL", "http://localhost:3000")
