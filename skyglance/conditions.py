# ABOUTME: Maps Open-Meteo WMO weather codes to human-readable condition categories.
# ABOUTME: Total over all integers; codes outside the table are reported as "Unknown".

UNKNOWN = "Unknown"
UNKNOWN_ICON = "⛅"

# (lowest code, highest code, label, icon); first matching row wins
_CONDITIONS = (
    (0, 0, "Clear sky", "☀️"),
    (1, 2, "Partly cloudy", "⛅"),
    (3, 3, "Overcast", "☁️"),
    (45, 45, "Fog", "🌫️"),
    (48, 48, "Fog", "🌫️"),
    (51, 67, "Drizzle", "🌦️"),
    (71, 77, "Snowfall", "❄️"),
    (80, 82, "Rain showers", "🌧️"),
    (95, 99, "Thunderstorm", "⛈️"),
)


def _lookup(code: int) -> tuple[str, str]:
    for low, high, label, icon in _CONDITIONS:
        if low <= code <= high:
            return label, icon
    return UNKNOWN, UNKNOWN_ICON


def describe(code: int) -> str:
    """Condition category for a weather code, e.g. describe(61) == "Drizzle"."""
    return _lookup(code)[0]


def describe_with_icon(code: int) -> str:
    """Condition category followed by its emoji, as shown next to the current reading."""
    label, icon = _lookup(code)
    return f"{label} {icon}"
