"""
Response parser module for the Fire Risk Monitor.

Turns the JSON bodies returned by the OpenWeatherMap current-weather and
air-pollution endpoints into WeatherReading and AirQualityReading objects.
Any missing, non-numeric or non-finite field is reported as MalformedResponse;
an air pollution response with an empty result list is reported as
EmptyResult.
"""

import json
import math
from collections.abc import Mapping
from typing import Any, Union

from .air_quality_reading import AirQualityReading
from .errors import EmptyResult, MalformedResponse
from .weather_reading import WeatherReading

RawJson = Union[Mapping, str, bytes]


def _load(raw_json: RawJson) -> Mapping:
    """Decodes a raw body if needed and checks that it is a JSON object."""
    if isinstance(raw_json, (str, bytes, bytearray)):
        try:
            raw_json = json.loads(raw_json)
        except ValueError as e:
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e
    
    if not isinstance(raw_json, Mapping):
        raise MalformedResponse(
            f"Expected a JSON object, got {type(raw_json).__name__}"
        )
    return raw_json


def _number(container: Any, path: str, prefix: str = "") -> float:
    """
    Looks up a dotted path in nested JSON objects and returns it as a float.
    
    Args:
        container: Decoded JSON object to search
        path: Dotted field path, e.g. "main.temp"
        prefix: Prefix added to the path in error messages
    
    Raises:
        MalformedResponse: If any segment is missing or the value is not a
            finite number
    """
    name = prefix + path
    value = container
    for key in path.split("."):
        if not isinstance(value, Mapping) or key not in value:
            raise MalformedResponse(f"Missing required field '{name}'")
        value = value[key]
    
    # bool is a subclass of int but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponse(f"Field '{name}' is not numeric: {value!r}")
    
    value = float(value)
    if not math.isfinite(value):
        raise MalformedResponse(f"Field '{name}' is not a finite number: {value!r}")
    return value


def parse_weather(raw_json: RawJson) -> WeatherReading:
    """
    Parses a current-weather API response.
    
    Required fields: main.temp, main.humidity, wind.speed, coord.lat,
    coord.lon. Humidity is truncated to a whole percentage.
    
    Args:
        raw_json: Decoded JSON object or raw JSON text
    
    Returns:
        The parsed WeatherReading
    
    Raises:
        MalformedResponse: If a required field is absent or not numeric
    """
    body = _load(raw_json)
    
    return WeatherReading(
        temperature_c=_number(body, "main.temp"),
        humidity_pct=int(_number(body, "main.humidity")),
        wind_speed_ms=_number(body, "wind.speed"),
        latitude=_number(body, "coord.lat"),
        longitude=_number(body, "coord.lon"),
    )


def parse_air_quality(raw_json: RawJson) -> AirQualityReading:
    """
    Parses an air-pollution API response.
    
    Only the first element of the "list" array is used. Required fields:
    list[0].main.aqi, list[0].components.co, list[0].components.pm2_5.
    
    Args:
        raw_json: Decoded JSON object or raw JSON text
    
    Returns:
        The parsed AirQualityReading
    
    Raises:
        EmptyResult: If the "list" array has no elements
        MalformedResponse: If "list" is missing or a required field is absent
            or not numeric
    """
    body = _load(raw_json)
    
    results = body.get("list")
    if not isinstance(results, list):
        raise MalformedResponse("Missing required field 'list'")
    if not results:
        raise EmptyResult("Air quality API returned no results")
    
    first = results[0]
    if not isinstance(first, Mapping):
        raise MalformedResponse("Field 'list[0]' is not a JSON object")
    
    return AirQualityReading(
        aqi_index=int(_number(first, "main.aqi", prefix="list[0].")),
        co_concentration=_number(first, "components.co", prefix="list[0]."),
        pm25=_number(first, "components.pm2_5", prefix="list[0]."),
    )
