from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Console settings loaded from environment variables."""

    app_title: str = "Tenant Admin Console"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Remote admin API
    api_base_url: str = "http://localhost:3000"
    api_token: str = ""
    session_cookie_name: str = "next-auth.session-token"
    session_cookie: str = ""
    request_timeout: float = 30.0

    # Materials upload
    max_upload_size_mb: int = 100

    # Fallback messages shown when the server does not supply one
    default_error_message: str = "Something went wrong. Please try again."
    transport_error_message: str = "Could not reach the server. Check your connection and try again."
    malformed_response_message: str = "The server returned an unreadable response."

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_client: str = "INFO"           # REST collection client
    log_level_controller: str = "INFO"       # Entity list controllers

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "env_prefix": "ADMIN_CONSOLE_",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
