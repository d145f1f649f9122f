# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Resolves place names to coordinates and fetches current conditions plus hourly temperatures.

import logging
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from skyglance.errors import InputError, MalformedResponseError, NotFoundError, TransportError
from skyglance.models import GeoLocation, HourlySeries, WeatherSnapshot

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_PARAMS = "temperature_2m,relative_humidity_2m,precipitation,wind_speed_10m,weather_code"

HOURLY_PARAMS = "temperature_2m"


async def resolve(client: httpx.AsyncClient, place_name: str, url: str = GEOCODING_URL) -> GeoLocation:
    """Geocode a place name to coordinates using the Open-Meteo geocoding API.

    Raises InputError for a blank name (no request is made), NotFoundError when the
    API has no match, TransportError for network or status failures and
    MalformedResponseError when the first match lacks a name or coordinates.
    """
    name = place_name.strip()
    if not name:
        raise InputError("Please enter a city name.")

    # httpx form-encodes params (spaces as "+"); the geocoder gets %20 instead
    query = urlencode({"name": name, "count": 1}, quote_via=quote)
    data = await _get_json(client, f"{url}?{query}")

    results = data.get("results")
    if not results:
        raise NotFoundError(f"No location found for {name!r}.")

    try:
        r = results[0]
        return GeoLocation(name=r["name"], latitude=r["latitude"], longitude=r["longitude"])
    except (KeyError, TypeError, ValidationError) as e:
        raise MalformedResponseError(f"Geocoding result for {name!r} is incomplete: {e}") from e


async def fetch(
    client: httpx.AsyncClient,
    location: GeoLocation,
    url: str = FORECAST_URL,
) -> tuple[WeatherSnapshot, HourlySeries]:
    """Fetch current conditions and the hourly temperature series for a location.

    Timestamps come back in the location's own timezone ("timezone=auto").
    """
    data = await _get_json(
        client,
        url,
        {
            "latitude": f"{location.latitude:.4f}",
            "longitude": f"{location.longitude:.4f}",
            "current": CURRENT_PARAMS,
            "hourly": HOURLY_PARAMS,
            "timezone": "auto",
        },
    )

    current = data.get("current")
    if not isinstance(current, dict):
        raise MalformedResponseError(f"Forecast for {location.name} has no current conditions.")
    return parse_current_data(current), parse_hourly_data(data.get("hourly"))


def parse_current_data(raw: dict) -> WeatherSnapshot:
    """Build a WeatherSnapshot from the Open-Meteo "current" object."""
    try:
        return WeatherSnapshot(
            local_time=raw["time"],
            temperature_c=raw["temperature_2m"],
            relative_humidity_pct=raw["relative_humidity_2m"],
            precipitation_mm=raw["precipitation"],
            wind_speed_kmh=raw["wind_speed_10m"],
            condition_code=raw["weather_code"],
        )
    except KeyError as e:
        raise MalformedResponseError(f"Current conditions missing field {e.args[0]!r}.") from e
    except ValidationError as e:
        raise MalformedResponseError(f"Current conditions are invalid: {e}") from e


def parse_hourly_data(raw: dict | None) -> HourlySeries:
    """Keep Open-Meteo's column layout; the aligner walks the two columns side by side."""
    if not isinstance(raw, dict):
        raise MalformedResponseError("Forecast has no hourly series.")
    try:
        return HourlySeries(times=raw["time"], temperatures_c=raw["temperature_2m"])
    except KeyError as e:
        raise MalformedResponseError(f"Hourly series missing column {e.args[0]!r}.") from e
    except ValidationError as e:
        raise MalformedResponseError(f"Hourly series is invalid: {e}") from e


async def _get_json(client: httpx.AsyncClient, url: str, params: dict | None = None) -> dict:
    """GET a JSON object, mapping transport and decoding failures to lookup errors."""
    try:
        resp = await client.get(url, params=params)
    except httpx.HTTPError as e:
        raise TransportError(f"Request to {url} failed: {e}") from e

    if not resp.is_success:
        raise TransportError(f"{url} answered with HTTP {resp.status_code}.")

    try:
        data = resp.json()
    except ValueError as e:
        raise MalformedResponseError(f"{url} returned a body that is not JSON.") from e
    if not isinstance(data, dict):
        raise MalformedResponseError(f"{url} returned JSON that is not an object.")
    logger.debug("GET %s ok (%d)", url, resp.status_code)
    return data
