"""
Configuration module for order service.

Centralized configuration management using Pydantic settings.
All values can be overridden via environment variables or .env file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Order service configuration.

    Attributes:
        SERVICE_NAME: Name used in logs and metrics
        SERVICE_VERSION: Version reported by the health endpoint
        SERVICE_HOST: Server bind address
        SERVICE_PORT: Server port number
        DEBUG: Enable debug mode (API docs, auto-reload)
        ENVIRONMENT: Deployment environment name
        LOG_LEVEL: Logging level
        LOG_JSON: Emit JSON logs instead of console output
        DB_PATH: Location of the JSON document holding orders, config and settings
        PUBLIC_DIR: Directory with the static frontend
        CORS_ORIGINS: Comma-separated list of allowed origins ("*" for any)
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="order-service")
    SERVICE_VERSION: str = Field(default="1.0.0")
    SERVICE_HOST: str = Field(default="0.0.0.0")
    SERVICE_PORT: int = Field(default=3000, ge=1, le=65535)
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=False)

    # Storage
    DB_PATH: Path = Field(
        default=SERVICE_ROOT / "db.json",
        description="JSON document with orders, pricing config and settings",
    )

    # Static frontend
    PUBLIC_DIR: Path = Field(default=SERVICE_ROOT / "public")

    # CORS
    CORS_ORIGINS: str = Field(default="*")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DB_PATH")
    @classmethod
    def validate_db_path(cls, value: Path) -> Path:
        """
        Reject paths that point at a directory.

        Raises:
            ValueError: If DB_PATH is an existing directory
        """
        if value.is_dir():
            raise ValueError(f"DB_PATH must be a file, got directory: {value}")
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
