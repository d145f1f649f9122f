# ABOUTME: Runtime settings read from the environment (and a .env file) plus logging setup.
# ABOUTME: Settings are validated with pydantic so a bad value fails at startup.

import logging
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from skyglance.weather_service import FORECAST_URL, GEOCODING_URL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class Settings(BaseModel):
    """Deployment parameters for the lookup service."""

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    http_timeout: float = Field(default=10.0, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_settings() -> Settings:
    """Build Settings from SKYGLANCE_* environment variables, loading .env first."""
    load_dotenv()
    return Settings(
        geocoding_url=os.environ.get("SKYGLANCE_GEOCODING_URL", GEOCODING_URL),
        forecast_url=os.environ.get("SKYGLANCE_FORECAST_URL", FORECAST_URL),
        http_timeout=os.environ.get("SKYGLANCE_HTTP_TIMEOUT", "10"),
        log_level=os.environ.get("SKYGLANCE_LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger and quiet httpx request logs."""
    logger = logging.getLogger("skyglance")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
