# ABOUTME: Hourly aligner that picks the short-range forecast window after the current reading.
# ABOUTME: Pure function over the parallel hourly columns returned by the forecast API.

from collections.abc import Sequence

from skyglance.models import ForecastEntry, ForecastSeries

FORECAST_HOURS = 3


def align(snapshot_time: str, hourly_times: Sequence[str], hourly_temps: Sequence[float]) -> ForecastSeries:
    """Return up to FORECAST_HOURS entries following snapshot_time in the hourly series.

    The first entry exactly equal to snapshot_time anchors the window. When there is no
    match the window starts at the beginning of the series. Short series give short results.
    """
    start = 0
    for i, t in enumerate(hourly_times):
        if t == snapshot_time:
            start = i + 1
            break

    stop = start + FORECAST_HOURS
    return tuple(
        ForecastEntry(local_time=t, temperature_c=temp)
        for t, temp in zip(hourly_times[start:stop], hourly_temps[start:stop])
    )
