"""
Air quality reading module for the Fire Risk Monitor.

Defines the AirQualityReading dataclass produced from the air pollution API
response for the coordinates of a WeatherReading.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AirQualityReading:
    """
    Represents an air quality observation.
    
    Attributes:
        aqi_index: OpenWeatherMap air quality index (1 = good ... 5 = very poor)
        co_concentration: Carbon monoxide concentration in µg/m³
        pm25: Fine particulate matter (PM2.5) concentration in µg/m³
    """
    
    aqi_index: int
    co_concentration: float
    pm25: float
