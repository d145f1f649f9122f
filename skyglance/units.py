# ABOUTME: Unit conversions for temperature and wind speed.
# ABOUTME: Values are converted exactly; rounding is left to whoever renders them.

from skyglance.models import TemperatureUnit

MPH_PER_KMH = 0.621371


def celsius_to_fahrenheit(c: float) -> float:
    return c * 9 / 5 + 32


def kmh_to_mph(k: float) -> float:
    return k * MPH_PER_KMH


def temperature_in(c: float, unit: TemperatureUnit) -> tuple[float, str]:
    """Temperature in the display unit, with its symbol."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return celsius_to_fahrenheit(c), "°F"
    return c, "°C"


def wind_speed_in(kmh: float, unit: TemperatureUnit) -> tuple[float, str]:
    """Wind speed for the display unit: mph alongside Fahrenheit, km/h otherwise."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return kmh_to_mph(kmh), "mph"
    return kmh, "km/h"
