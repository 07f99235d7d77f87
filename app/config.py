"""
Client configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.exceptions import ConfigurationError
from domain.enums import ResponseShape

DEFAULT_API_BASE_URL = "http://localhost:8000"


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Client settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="PocketSomm", description="Application name, sent in User-Agent")
    app_version: str = Field(default="0.1.0", description="Client version, sent in User-Agent")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )

    # Backend settings
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="PocketSomm backend base URL (API_BASE_URL)",
    )
    request_timeout_sec: float = Field(
        default=120.0, gt=0, description="Per-request connect/read/write timeout"
    )
    resource_timeout_sec: Optional[float] = Field(
        default=240.0, gt=0, description="Upper bound on a whole request/response exchange"
    )
    response_shape: Optional[ResponseShape] = Field(
        default=None,
        description="Force every endpoint to one response shape (bare, enveloped, auto)",
    )
    default_user_id: Optional[str] = Field(
        default=None, description="User id used by the CLI when --user is omitted"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("response_shape", mode="before")
    @classmethod
    def validate_response_shape(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return ResponseShape(v) if v else None
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION


def validate_base_url(raw: Optional[str]) -> str:
    """Return the normalized base URL or raise ConfigurationError.

    The URL must be absolute http(s) with a host. A trailing slash is removed.
    """
    if raw is None or not raw.strip():
        raise ConfigurationError(raw, reason="API_BASE_URL is not set")

    value = raw.strip()
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise ConfigurationError(raw, reason=str(exc)) from exc

    if url.scheme not in ("http", "https"):
        raise ConfigurationError(raw, reason="scheme must be http or https")
    if not url.host:
        raise ConfigurationError(raw, reason="missing host")
    if url.query or url.fragment:
        raise ConfigurationError(raw, reason="base URL must not carry a query or fragment")

    return value.rstrip("/")


# Global settings instance
settings = Settings()
