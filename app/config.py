"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./notifications.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp and render notification dates, read from the global settings only",
    )
    inbox_limit: int = Field(
        default=100,
        description="Maximum number of notifications returned by inbox and archive queries",
        gt=0,
    )
    default_module_id: str = Field(
        default="botpress",
        description="Module identifier used when the caller is not a registered module",
        min_length=1,
    )
    default_module_icon: str = Field(default="view_module")
    default_module_name: str = Field(default="botpress")
    default_redirect_url: str = Field(default="/")
    modules_manifest: str | None = Field(
        default=None,
        description="Optional path to a JSON file describing the registered modules",
    )
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
