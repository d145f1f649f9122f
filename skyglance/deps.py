# ABOUTME: Builds the shared httpx client and the WeatherLookup that uses it.
# ABOUTME: The client carries the configured timeout so a stalled API fails instead of hanging.

import httpx

from skyglance.config import Settings, configure_logging, load_settings
from skyglance.lookup import WeatherLookup


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with a bounded timeout and no retries."""
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))


def create_lookup(settings: Settings | None = None) -> WeatherLookup:
    """Wire settings, logging, and an HTTP client into a ready WeatherLookup.

    The caller owns the returned lookup's http_client and should close it with aclose().
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    return WeatherLookup(
        create_http_client(settings),
        geocoding_url=settings.geocoding_url,
        forecast_url=settings.forecast_url,
    )
