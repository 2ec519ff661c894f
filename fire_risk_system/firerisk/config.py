"""
Configuration module for the Fire Risk Monitor.

Settings are read from environment variables. A .env file in the working
directory is loaded first, so the OpenWeatherMap key can live there instead
of in source control.
"""

import os
from pathlib import Path
from typing import Final, Optional

from dotenv import load_dotenv

load_dotenv()

# OpenWeatherMap endpoints
DEFAULT_WEATHER_API_URL: Final[str] = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_AIR_QUALITY_API_URL: Final[str] = "http://api.openweathermap.org/data/2.5/air_pollution"

WEATHER_API_URL: str = os.getenv("FIRERISK_WEATHER_API_URL", DEFAULT_WEATHER_API_URL)
AIR_QUALITY_API_URL: str = os.getenv("FIRERISK_AIR_QUALITY_API_URL", DEFAULT_AIR_QUALITY_API_URL)

# Polling and HTTP settings
POLL_INTERVAL_MS: int = int(os.getenv("FIRERISK_POLL_INTERVAL_MS", "300000"))  # 5 minutes
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("FIRERISK_REQUEST_TIMEOUT_SECONDS", "15"))

# Location searched on startup (empty means the user has to enter one)
DEFAULT_LOCATION: str = os.getenv("FIRERISK_DEFAULT_LOCATION", "")

# Logging
LOG_LEVEL: str = os.getenv("FIRERISK_LOG_LEVEL", "INFO").upper()
LOG_DIR: Path = Path(os.getenv("FIRERISK_LOG_DIR", "logs"))
LOG_FILE_NAME: Final[str] = "fire_risk_monitor.log"


def get_api_key() -> Optional[str]:
    """
    Returns the OpenWeatherMap API key, or None if it is not configured.
    
    Read on every call so a key added to the environment after import is
    picked up.
    """
    api_key = os.getenv("OPENWEATHER_API_KEY", "").strip()
    return api_key or None
