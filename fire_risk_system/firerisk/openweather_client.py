"""
OpenWeatherMap client module for the Fire Risk Monitor.

This module contains the OpenWeatherClient class which performs the two HTTP
GET requests the monitor needs (current weather by location name, then air
pollution by coordinates) and hands the bodies to the response parser.
Every transport or HTTP status failure is reported as ApiRequestFailed.
"""

import logging
from typing import Any, Optional

import requests

from . import config
from .air_quality_reading import AirQualityReading
from .errors import ApiRequestFailed, InvalidInput, MalformedResponse
from .response_parser import parse_air_quality, parse_weather
from .weather_reading import WeatherReading

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """
    Client for the OpenWeatherMap current-weather and air-pollution APIs.
    
    No retries and no caching: a failed request fails the current poll
    cycle, and the next cycle simply tries again.
    """
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        weather_url: str = config.WEATHER_API_URL,
        air_quality_url: str = config.AIR_QUALITY_API_URL,
        timeout: float = config.REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.
        
        Args:
            api_key: OpenWeatherMap API key; read from OPENWEATHER_API_KEY if None
            weather_url: Current-weather endpoint
            air_quality_url: Air-pollution endpoint
            timeout: Per-request timeout in seconds
            session: Optional requests.Session to reuse (mainly for tests)
        """
        self.api_key = api_key if api_key is not None else config.get_api_key()
        self.weather_url = weather_url
        self.air_quality_url = air_quality_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
    
    def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        """
        Performs a GET request and returns the decoded JSON body.
        
        Raises:
            ApiRequestFailed: On a missing API key, a non-2xx status or any
                transport failure
            MalformedResponse: If the body is not valid JSON
        """
        if not self.api_key:
            raise ApiRequestFailed(None, "OPENWEATHER_API_KEY is not configured")
        
        query = dict(params, appid=self.api_key)
        
        try:
            response = self.session.get(url, params=query, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            reason = e.response.reason if e.response is not None else str(e)
            logger.error("HTTP error from %s: %s - %s", url, status_code, reason)
            raise ApiRequestFailed(status_code, reason or "HTTP error") from e
        except requests.exceptions.RequestException as e:
            logger.error("Request error to %s: %s", url, e)
            raise ApiRequestFailed(None, str(e)) from e
        
        # raise_for_status() lets 1xx and 3xx through
        if not 200 <= response.status_code < 300:
            logger.error("Unexpected HTTP status from %s: %s", url, response.status_code)
            raise ApiRequestFailed(response.status_code, response.reason or "Unexpected HTTP status")
        
        try:
            return response.json()
        except ValueError as e:
            logger.error("Non-JSON response from %s", url)
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e
    
    def fetch_weather_json(self, location: str) -> Any:
        """Fetches the raw current-weather body for a location name."""
        location = (location or "").strip()
        if not location:
            raise InvalidInput("Please enter a location", fields=("location",))
        
        logger.info("Fetching weather for %r", location)
        return self._get_json(self.weather_url, {"q": location, "units": "metric"})
    
    def fetch_air_quality_json(self, latitude: float, longitude: float) -> Any:
        """Fetches the raw air-pollution body for a coordinate pair."""
        logger.info("Fetching air quality for lat=%s, lon=%s", latitude, longitude)
        return self._get_json(self.air_quality_url, {"lat": latitude, "lon": longitude})
    
    def fetch_weather(self, location: str) -> WeatherReading:
        """
        Fetches and parses the current weather for a location.
        
        Args:
            location: City or place name, e.g. "Hoshiarpur" or "London,GB"
        
        Returns:
            The parsed WeatherReading
        
        Raises:
            InvalidInput: If the location is blank
            ApiRequestFailed: If the request fails
            MalformedResponse: If the response lacks a required field
        """
        return parse_weather(self.fetch_weather_json(location))
    
    def fetch_air_quality(self, latitude: float, longitude: float) -> AirQualityReading:
        """
        Fetches and parses the current air quality at a coordinate pair.
        
        Raises:
            ApiRequestFailed: If the request fails
            MalformedResponse: If the response lacks a required field
            EmptyResult: If the API returned no results
        """
        return parse_air_quality(self.fetch_air_quality_json(latitude, longitude))
    
    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
