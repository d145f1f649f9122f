# ABOUTME: Pydantic BaseModels for locations, weather readings, and lookup outcomes.
# ABOUTME: All models are frozen so a lookup result can be shared without copying.

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skyglance.errors import ErrorKind


class TimeOfDay(StrEnum):
    """Presentation bucket derived from the local hour."""

    SUNRISE = "sunrise"
    DAY = "day"
    SUNSET = "sunset"
    NIGHT = "night"

    @property
    def background_image(self) -> str:
        """File name of the theme image for this bucket."""
        return f"{self.value}.jpg"


class TemperatureUnit(StrEnum):
    """Display unit chosen by the user. Fahrenheit also switches wind speed to mph."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class GeoLocation(BaseModel):
    """Geocoded place with coordinates and canonical display name."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class WeatherSnapshot(BaseModel):
    """Current conditions at a location, timestamped in the location's local time."""

    model_config = ConfigDict(frozen=True)

    local_time: str
    temperature_c: float
    relative_humidity_pct: float
    precipitation_mm: float
    wind_speed_kmh: float
    condition_code: int


class HourlySeries(BaseModel):
    """Open-Meteo hourly columns: parallel timestamps and temperatures."""

    model_config = ConfigDict(frozen=True)

    times: tuple[str, ...] = ()
    temperatures_c: tuple[float, ...] = ()

    @model_validator(mode="after")
    def _columns_match(self) -> "HourlySeries":
        if len(self.times) != len(self.temperatures_c):
            raise ValueError(
                f"hourly columns differ in length: {len(self.times)} times, "
                f"{len(self.temperatures_c)} temperatures"
            )
        return self


class ForecastEntry(BaseModel):
    """One hourly forecast point."""

    model_config = ConfigDict(frozen=True)

    local_time: str
    temperature_c: float


ForecastSeries = tuple[ForecastEntry, ...]


class SearchHistoryEntry(BaseModel):
    """One completed lookup, as recorded in the search history."""

    model_config = ConfigDict(frozen=True)

    city_name: str
    local_time: str

    @property
    def label(self) -> str:
        return f"{self.city_name} – {self.local_time}"


class LookupResult(BaseModel):
    """Everything a successful lookup produced."""

    model_config = ConfigDict(frozen=True)

    request_id: int
    location: GeoLocation
    snapshot: WeatherSnapshot
    forecast: ForecastSeries = ()


class LookupFailure(BaseModel):
    """A failed lookup: which request, what kind of failure, and a message for the user."""

    model_config = ConfigDict(frozen=True)

    request_id: int
    place_name: str
    kind: ErrorKind
    message: str
