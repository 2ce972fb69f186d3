"""
API Configuration
Settings for the directory API, read from the environment (or .env).
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = "change-me"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class APISettings(BaseSettings):
    """
    Directory API settings.

    Every field can be overridden by the environment variable named in its
    alias, e.g. ADMIN_PASSWORD or MAX_UPLOAD_BYTES.
    """

    app_name: str = "Supplier Directory API"
    version: str = "0.1.0"
    description: str = "Public supplier catalogue with admin console and CSV import"

    # Server
    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")

    # CORS (the catalogue and admin frontends)
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        alias="API_CORS_ORIGINS",
    )
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Logging
    log_level: str = Field(default="INFO", alias="API_LOG_LEVEL")
    slow_request_ms: int = Field(default=300, gt=0, alias="SLOW_REQUEST_MS")

    # Admin console credential
    admin_username: str = Field(default="admin", min_length=1, alias="ADMIN_USERNAME")
    admin_password: SecretStr = Field(default=SecretStr(DEFAULT_ADMIN_PASSWORD), alias="ADMIN_PASSWORD")

    # CSV uploads
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0, alias="MAX_UPLOAD_BYTES")

    # Catalogue
    seed_demo_data: bool = Field(default=True, alias="SEED_DEMO_DATA")
    default_page_size: int = Field(default=20, ge=1, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, ge=1, alias="MAX_PAGE_SIZE")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> List[str]:
        """Parse CORS origins from JSON string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # Fall back to comma-separated list
                return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def check_page_sizes(self) -> "APISettings":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"DEFAULT_PAGE_SIZE ({self.default_page_size}) exceeds MAX_PAGE_SIZE ({self.max_page_size})"
            )
        return self

    @property
    def uses_default_admin_password(self) -> bool:
        return self.admin_password.get_secret_value() == DEFAULT_ADMIN_PASSWORD

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )


# Global settings instance
_settings: Optional[APISettings] = None


def get_settings() -> APISettings:
    """Get global API settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = APISettings()
        if _settings.uses_default_admin_password:
            logger.warning("ADMIN_PASSWORD is not set; the admin console accepts the default password")
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
