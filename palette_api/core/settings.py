from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _split_list(value) -> List[str]:
    """Comma-separated string or list -> list of non-empty items; '*' when empty."""
    if isinstance(value, str):
        items = [item.strip() for item in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = [str(item).strip() for item in value]
    else:
        items = []
    return [item for item in items if item] or ["*"]


class AppSettings(BaseSettings):
    """
    Service settings: HTTP metadata, CORS, startup tasks and log level.

    Database connection settings live in palette_api.db.config.Settings.
    """

    APP_NAME: str = Field(default="Palette API")
    APP_DESCRIPTION: str = Field(
        default="Projects and their color palettes, with uniqueness and cascade-delete rules."
    )
    APP_VERSION: str = Field(default="0.1.0")

    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Allowed origins, comma-separated. '*' allows any origin without credentials.",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=False)
    CORS_ALLOW_METHODS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE"]
    )
    CORS_ALLOW_HEADERS: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    RUN_MIGRATIONS_ON_STARTUP: bool = Field(
        default=True,
        description="Upgrade the schema to the latest Alembic revision when the app starts.",
    )
    AUTO_SEED: bool = Field(
        default=False,
        description="Replace all projects and palettes with the sample data after migrations.",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root log level name")
    ENVIRONMENT: Optional[str] = Field(default=None, description="Environment label (dev/test/prod)")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("CORS_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS", mode="before")
    @classmethod
    def _parse_list(cls, v):
        return _split_list(v)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _parse_log_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def _no_credentials_with_wildcard(self) -> "AppSettings":
        # Browsers reject credentialed responses for a wildcard origin.
        if self.CORS_ORIGINS == ["*"] and self.CORS_ALLOW_CREDENTIALS:
            logger.warning("CORS_ALLOW_CREDENTIALS ignored with '*' origins.")
            self.CORS_ALLOW_CREDENTIALS = False
        return self


# PUBLIC_INTERFACE
@lru_cache
def get_app_settings() -> AppSettings:
    """Application settings read once from the environment."""
    return AppSettings()
