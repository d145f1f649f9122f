# ABOUTME: Shared test fixtures for the skyglance test suite.
# ABOUTME: Provides canned Open-Meteo payloads shared by the service and lookup tests.

import pytest


@pytest.fixture
def geocode_payload() -> dict:
    return {
        "results": [
            {
                "id": 2643743,
                "name": "London",
                "latitude": 51.50853,
                "longitude": -0.12574,
                "country": "United Kingdom",
                "timezone": "Europe/London",
            }
        ]
    }


@pytest.fixture
def forecast_payload() -> dict:
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "Europe/London",
        "current": {
            "time": "2025-06-05T18:00",
            "interval": 900,
            "temperature_2m": 21.4,
            "relative_humidity_2m": 55.0,
            "precipitation": 0.0,
            "wind_speed_10m": 12.6,
            "weather_code": 2,
        },
        "hourly": {
            "time": [
                "2025-06-05T16:00",
                "2025-06-05T17:00",
                "2025-06-05T18:00",
                "2025-06-05T19:00",
                "2025-06-05T20:00",
                "2025-06-05T21:00",
                "2025-06-05T22:00",
            ],
            "temperature_2m": [22.0, 21.8, 21.4, 20.9, 19.7, 18.2, 17.5],
        },
    }
