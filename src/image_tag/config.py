"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.window import Weekday

DEFAULT_IMAGE_DAY = int(Weekday.MONDAY)

logger = structlog.get_logger(__name__)


class LoggingSettings(BaseSettings):
    """Logging settings, loaded before anything else logs."""

    model_config = SettingsConfigDict(
        env_prefix="FG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["text", "json"] = "text"


class Settings(LoggingSettings):
    """Application settings loaded from FG_* environment variables.

    Built once at startup and never changed afterwards.
    """

    # Weekday the dated image is built on, Sunday=0
    image_day: int = DEFAULT_IMAGE_DAY

    # Service configuration
    host: str = "0.0.0.0"
    port: int = 8080
    keep_alive_timeout: int = 30  # seconds

    build_date: str = "now"

    @field_validator("image_day", mode="before")
    @classmethod
    def fallback_invalid_image_day(cls, value: Any) -> int:
        """Replace a non-numeric or out-of-range image day with the default."""
        try:
            day = int(value)
        except (TypeError, ValueError) as e:
            logger.warning("image_day_invalid", value=value, error=str(e))
            return DEFAULT_IMAGE_DAY
        if not Weekday.SUNDAY <= day <= Weekday.SATURDAY:
            logger.warning("image_day_invalid", value=value, error="outside 0-6")
            return DEFAULT_IMAGE_DAY
        return day


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
