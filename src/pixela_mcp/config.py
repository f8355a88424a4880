"""Application configuration management using Pydantic settings."""
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://pixe.la"


class PixelaSettings(BaseModel):
    """Settings for the outbound Pixela API client."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Pixela API.",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Connect and read deadline in seconds applied to every outbound call.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class ServerSettings(BaseModel):
    """Settings for the HTTP transport."""

    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP transport binds to.",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port the HTTP transport listens on.",
    )


class AppSettings(BaseSettings):
    """Top-level application settings container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PIXELA_MCP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    pixela: PixelaSettings = Field(default_factory=PixelaSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    log_level: str = Field(
        default="INFO",
        description="Name of the root log level.",
    )


@lru_cache
def get_settings() -> AppSettings:
    """Return the cached application settings instance."""

    return AppSettings()


def reset_settings_cache() -> None:
    """Clear the cached settings so future calls reflect new environment values."""

    get_settings.cache_clear()


__all__ = [
    "AppSettings",
    "DEFAULT_BASE_URL",
    "PixelaSettings",
    "ServerSettings",
    "get_settings",
    "reset_settings_cache",
]
