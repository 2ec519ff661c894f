"""
Display formatting module for the Fire Risk Monitor.

Builds the label strings the UI shows for the current readings and the risk
status. Keeping the wording here lets the web UI and the console runner show
exactly the same text.
"""

from dataclasses import dataclass

from .air_quality_reading import AirQualityReading
from .risk_assessment import RiskAssessment, RiskFactor
from .weather_reading import WeatherReading

ERROR_STATUS_TEXT = "Status: Error fetching data"
ERROR_STATUS_COLOR = "red"
INITIAL_STATUS_TEXT = "Status: Initializing..."


@dataclass(frozen=True)
class ReadingLabels:
    """Formatted label text for the four live readings."""
    
    temperature: str
    humidity: str
    wind: str
    air_quality: str
    
    def as_lines(self) -> list[str]:
        return [self.temperature, self.humidity, self.wind, self.air_quality]


def format_readings(weather: WeatherReading, air_quality: AirQualityReading) -> ReadingLabels:
    """
    Formats the current readings for display.
    
    Args:
        weather: Current weather reading
        air_quality: Current air quality reading
    
    Returns:
        ReadingLabels, e.g. temperature="Temperature: 40.0°C"
    """
    return ReadingLabels(
        temperature=f"Temperature: {weather.temperature_c:.1f}°C",
        humidity=f"Humidity: {weather.humidity_pct}%",
        wind=f"Wind Speed: {weather.wind_speed_ms:.1f} m/s",
        air_quality=f"Air Quality Index: {air_quality.aqi_index} (PM2.5: {air_quality.pm25:.1f} µg/m³)",
    )


def format_status(assessment: RiskAssessment) -> str:
    """Returns the status line for an assessment, e.g. "Status: High Fire Risk"."""
    return f"Status: {assessment.level.label}"


def format_triggered_factors(assessment: RiskAssessment) -> str:
    """Comma-separated triggered factors in a stable order, or "None"."""
    names = [factor.value for factor in RiskFactor if factor in assessment.triggered_factors]
    return ", ".join(names) if names else "None"
