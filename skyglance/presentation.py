# ABOUTME: Display state threaded between renders and the report handed to the UI layer.
# ABOUTME: Discards stale lookup outcomes and converts results into the chosen display unit.

from pydantic import BaseModel, ConfigDict

from skyglance.conditions import describe_with_icon
from skyglance.daypart import classify
from skyglance.models import LookupFailure, LookupResult, TemperatureUnit, TimeOfDay
from skyglance.units import temperature_in, wind_speed_in


class ForecastLine(BaseModel):
    """One forecast hour in the display unit."""

    model_config = ConfigDict(frozen=True)

    local_time: str
    temperature: float


class WeatherReport(BaseModel):
    """Everything the UI needs to show one lookup result."""

    model_config = ConfigDict(frozen=True)

    city_name: str
    local_time: str
    unit: TemperatureUnit
    temperature: float
    temperature_symbol: str
    wind_speed: float
    wind_speed_symbol: str
    relative_humidity_pct: float
    precipitation_mm: float
    condition: str
    time_of_day: TimeOfDay
    forecast: tuple[ForecastLine, ...] = ()


def build_report(result: LookupResult, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> WeatherReport:
    """Convert a lookup result into display values for the given unit."""
    snapshot = result.snapshot
    temperature, temperature_symbol = temperature_in(snapshot.temperature_c, unit)
    wind_speed, wind_speed_symbol = wind_speed_in(snapshot.wind_speed_kmh, unit)
    return WeatherReport(
        city_name=result.location.name,
        local_time=snapshot.local_time,
        unit=unit,
        temperature=temperature,
        temperature_symbol=temperature_symbol,
        wind_speed=wind_speed,
        wind_speed_symbol=wind_speed_symbol,
        relative_humidity_pct=snapshot.relative_humidity_pct,
        precipitation_mm=snapshot.precipitation_mm,
        condition=describe_with_icon(snapshot.condition_code),
        time_of_day=classify(snapshot.local_time),
        forecast=tuple(
            ForecastLine(local_time=entry.local_time, temperature=temperature_in(entry.temperature_c, unit)[0])
            for entry in result.forecast
        ),
    )


class DisplayState(BaseModel):
    """What the UI is currently showing.

    The UI keeps one of these and replaces it with the value returned by each
    transition. Search history lives in WeatherLookup, so nothing here can clear it.
    """

    model_config = ConfigDict(frozen=True)

    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    result: LookupResult | None = None
    error: LookupFailure | None = None
    latest_request_id: int = 0

    def apply(self, outcome: LookupResult | LookupFailure) -> "DisplayState":
        """Show a lookup outcome, unless a newer one has already been applied."""
        if outcome.request_id <= self.latest_request_id:
            return self
        if isinstance(outcome, LookupFailure):
            return self.model_copy(update={"error": outcome, "latest_request_id": outcome.request_id})
        return DisplayState(result=outcome, latest_request_id=outcome.request_id)

    def with_unit(self, unit: TemperatureUnit) -> "DisplayState":
        return self.model_copy(update={"unit": unit})

    def cleared(self) -> "DisplayState":
        """Blank display. Keeps the request id so late outcomes are still ordered."""
        return DisplayState(latest_request_id=self.latest_request_id)

    @property
    def theme(self) -> TimeOfDay | None:
        """Background bucket for the shown result; None means the default background."""
        if self.result is None:
            return None
        return classify(self.result.snapshot.local_time)

    def report(self) -> WeatherReport | None:
        if self.result is None:
            return None
        return build_report(self.result, self.unit)
