"""Application configuration using Pydantic Settings."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_api.core.roles import Role

# Calculate project root: config.py is in blog_api/, so go up one level
_CONFIG_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _CONFIG_DIR.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Blog API", description="Application name")
    app_env: str = Field(default="development", description="Application environment")

    # Server
    host: str = Field(default="127.0.0.1", description="Interface uvicorn binds to")
    port: int = Field(default=5500, description="Port uvicorn listens on")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed by the CORS middleware",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    # Database
    database_url: str = Field(
        default="sqlite:///./blog_api.db",
        description="SQLAlchemy database connection URL",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")
    create_tables_on_startup: bool = Field(
        default=True,
        description="Run metadata.create_all when the application starts",
    )

    # Users
    default_user_role: Role | None = Field(
        default=None,
        description="Role given to users created without one. Falls back to the model default when unset",
        alias="DEFAULT_USER_ROLE",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str:
        """Validate and normalize database URL."""
        if v is None or v == "":
            raise ValueError("DATABASE_URL is required")
        return v.strip()

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_app_env(cls, v: str) -> str:
        """Normalize app environment to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("app_name", mode="before")
    @classmethod
    def normalize_app_name(cls, v: str) -> str:
        """Normalize app name by stripping whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names the logging module does not know."""
        level = v.upper().strip() if isinstance(v, str) else v
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_user_role", mode="before")
    @classmethod
    def normalize_default_user_role(cls, v: str | None) -> str | None:
        """Treat an empty value as unset."""
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v


def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings: Application settings instance

    Example:
        ```python
        from blog_api.config import get_settings

        settings = get_settings()
        print(settings.database_url)
        ```
    """
    return Settings()


# Global settings instance
settings = get_settings()
