"""
Pytest configuration for Fire Risk Monitor tests.

Registers custom markers and provides shared fixtures, including sample
OpenWeatherMap response bodies.
"""

import copy

import pytest


WEATHER_BODY = {
    "coord": {"lon": 75.9167, "lat": 31.5333},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky"}],
    "main": {"temp": 40.0, "feels_like": 38.2, "pressure": 1003, "humidity": 20},
    "wind": {"speed": 20.0, "deg": 290},
    "name": "Hoshiarpur",
    "cod": 200,
}

AIR_QUALITY_BODY = {
    "coord": {"lon": 75.9167, "lat": 31.5333},
    "list": [
        {
            "main": {"aqi": 4},
            "components": {"co": 453.95, "no2": 12.1, "o3": 71.5, "pm2_5": 60.0, "pm10": 91.2},
            "dt": 1719842709,
        }
    ],
}


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def weather_body():
    """Fixture providing a fresh copy of a current-weather response body."""
    return copy.deepcopy(WEATHER_BODY)


@pytest.fixture
def air_quality_body():
    """Fixture providing a fresh copy of an air-pollution response body."""
    return copy.deepcopy(AIR_QUALITY_BODY)
