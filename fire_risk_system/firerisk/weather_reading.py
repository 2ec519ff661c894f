"""
Weather reading module for the Fire Risk Monitor.

This module defines the WeatherReading dataclass which represents a single
current-weather observation for a location: temperature, relative humidity,
wind speed and the coordinates reported by the weather API. The coordinates
are used to look up air quality for the same place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReading:
    """
    Represents a current-weather observation returned by the weather API.
    
    Readings are created fresh on every poll cycle and are never modified
    after construction.
    
    Attributes:
        temperature_c: Air temperature in degrees Celsius
        humidity_pct: Relative humidity in percent
        wind_speed_ms: Wind speed in metres per second
        latitude: Latitude of the observed location
        longitude: Longitude of the observed location
    """
    
    temperature_c: float
    humidity_pct: int
    wind_speed_ms: float
    latitude: float
    longitude: float
    
    @property
    def coordinates(self) -> tuple[float, float]:
        """Returns the (latitude, longitude) pair used for the air quality lookup."""
        return (self.latitude, self.longitude)
