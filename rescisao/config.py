"""Application configuration via pydantic-settings.

Secrets are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
The calculation engine itself reads no settings; only the HTTP surface does.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_host: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    api_port: int = Field(default=8000, description="Bind port for uvicorn")
    cors_origins: str = Field(
        default="",
        description="Comma-separated origins allowed to call the calculator",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        if not self.cors_origins:
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


class SecuritySettings(BaseSettings):
    """Authentication settings for the calculator routes."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    calculator_api_keys: str = Field(
        default="",
        description="Comma-separated platform:key pairs accepted in the X-API-Key header",
    )

    @property
    def api_keys(self) -> dict[str, str]:
        """Parse platform:key pairs; entries without a platform or key are skipped."""
        keys: dict[str, str] = {}
        for entry in self.calculator_api_keys.split(","):
            platform, _, key = entry.strip().partition(":")
            if platform.strip() and key.strip():
                keys[platform.strip()] = key.strip()
        return keys


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.api.api_port
        settings.security.api_keys
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="DEBUG")

    # Composed settings (loaded from same .env)
    api: APISettings = Field(default_factory=APISettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
