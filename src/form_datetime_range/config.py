"""
Configuration management for the date/time range helpers.
"""

import logging
import os
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

from .utils.dates import DEFAULT_DATE_FORMAT

# Load environment variables from .env file
load_dotenv()


class DisplayConfig(BaseModel):
    """Configuration for how dates are shown to users."""

    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT, description="Date format token shown in help text"
    )
    datetime_format: str = Field(
        default="%Y-%m-%d %H:%M", description="strftime format for printed instants"
    )


class AppConfig(BaseModel):
    """Main application configuration."""

    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class Config:
    """Main configuration class that loads all settings."""

    def __init__(self):
        self.display = DisplayConfig(
            date_format=os.getenv("DATE_FORMAT", DEFAULT_DATE_FORMAT),
            datetime_format=os.getenv("DISPLAY_DATETIME_FORMAT", "%Y-%m-%d %H:%M"),
        )

        self.app = AppConfig(log_level=os.getenv("LOG_LEVEL", "INFO"))


def get_config() -> Config:
    """Get the application configuration."""
    return Config()


class LazyConfig:
    def __init__(self):
        self._config = None

    def __getattr__(self, name):
        if self._config is None:
            self._config = Config()
        return getattr(self._config, name)


config = LazyConfig()
