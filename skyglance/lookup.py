# ABOUTME: Runs one weather lookup end to end: resolve, fetch, align, record history.
# ABOUTME: Returns a LookupResult or LookupFailure value instead of letting lookup errors escape.

import itertools
import logging

import httpx

from skyglance.errors import WeatherLookupError
from skyglance.forecast import align
from skyglance.history import SearchHistory
from skyglance.models import LookupFailure, LookupResult, SearchHistoryEntry
from skyglance.weather_service import FORECAST_URL, GEOCODING_URL, fetch, resolve

logger = logging.getLogger(__name__)


class WeatherLookup:
    """Turns place names into weather results using one shared HTTP client.

    Every call gets a request id from a counter that only goes up, so a display that
    receives outcomes out of order can tell which one is newest. The search history
    gains exactly one entry per successful lookup.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        history: SearchHistory | None = None,
        geocoding_url: str = GEOCODING_URL,
        forecast_url: str = FORECAST_URL,
    ):
        self.http_client = http_client
        self.history = history if history is not None else SearchHistory()
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url
        self._request_ids = itertools.count(1)

    async def lookup(self, place_name: str) -> LookupResult | LookupFailure:
        request_id = next(self._request_ids)
        try:
            location = await resolve(self.http_client, place_name, self.geocoding_url)
            snapshot, hourly = await fetch(self.http_client, location, self.forecast_url)
        except WeatherLookupError as e:
            logger.warning("Lookup #%d for %r failed (%s): %s", request_id, place_name, e.kind, e)
            return LookupFailure(request_id=request_id, place_name=place_name, kind=e.kind, message=str(e))

        forecast = align(snapshot.local_time, hourly.times, hourly.temperatures_c)
        self.history.append(SearchHistoryEntry(city_name=location.name, local_time=snapshot.local_time))
        logger.info(
            "Lookup #%d resolved %r to %s (%.4f, %.4f) at %s",
            request_id,
            place_name,
            location.name,
            location.latitude,
            location.longitude,
            snapshot.local_time,
        )
        return LookupResult(request_id=request_id, location=location, snapshot=snapshot, forecast=forecast)
