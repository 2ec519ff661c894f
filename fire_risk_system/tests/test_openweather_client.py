"""
Tests for OpenWeatherClient.

HTTP is mocked at the requests.Session level.

Tests cover:
- Equivalence classes: successful weather and air quality fetches
- Request shape: URLs, query parameters, API key, units, timeout
- Error scenarios: non-2xx status, transport errors, non-JSON bodies,
  missing API key, blank location
"""

import json
from unittest.mock import Mock

import pytest
import requests
from firerisk.openweather_client import OpenWeatherClient
from firerisk.errors import ApiRequestFailed, EmptyResult, InvalidInput, MalformedResponse


WEATHER_URL = "https://weather.example/data/2.5/weather"
AIR_URL = "http://weather.example/data/2.5/air_pollution"


def make_response(status_code=200, body=None, text=None, reason="OK"):
    """Builds a real requests.Response so raise_for_status() behaves normally."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = WEATHER_URL
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    return response


class TestOpenWeatherClient:
    """Test suite for OpenWeatherClient."""
    
    @pytest.fixture
    def session(self):
        """Fixture providing a mocked requests.Session."""
        return Mock(spec=requests.Session)
    
    @pytest.fixture
    def client(self, session):
        """Fixture providing a client wired to the mocked session."""
        return OpenWeatherClient(
            api_key="test-key",
            weather_url=WEATHER_URL,
            air_quality_url=AIR_URL,
            timeout=5,
            session=session
        )
    
    # ==================== Equivalence Classes ====================
    
    def test_fetch_weather(self, client, session, weather_body):
        """Equivalence class: 200 response → parsed WeatherReading."""
        session.get.return_value = make_response(body=weather_body)
        
        reading = client.fetch_weather("Hoshiarpur")
        
        assert reading.temperature_c == 40.0
        session.get.assert_called_once_with(
            WEATHER_URL,
            params={"q": "Hoshiarpur", "units": "metric", "appid": "test-key"},
            timeout=5
        )
    
    def test_fetch_weather_strips_location(self, client, session, weather_body):
        session.get.return_value = make_response(body=weather_body)
        client.fetch_weather("  New Delhi  ")
        assert session.get.call_args.kwargs["params"]["q"] == "New Delhi"
    
    def test_fetch_air_quality(self, client, session, air_quality_body):
        """Equivalence class: 200 response → parsed AirQualityReading."""
        session.get.return_value = make_response(body=air_quality_body)
        
        reading = client.fetch_air_quality(31.5333, 75.9167)
        
        assert reading.pm25 == 60.0
        session.get.assert_called_once_with(
            AIR_URL,
            params={"lat": 31.5333, "lon": 75.9167, "appid": "test-key"},
            timeout=5
        )
    
    def test_context_manager_closes_session(self, session):
        with OpenWeatherClient(api_key="k", session=session):
            pass
        session.close.assert_called_once()
    
    # ==================== Error Scenarios ====================
    
    @pytest.mark.parametrize("status_code, reason", [
        (401, "Unauthorized"),
        (300, "Multiple Choices"),
        (304, "Not Modified"),
        (103, "Early Hints"),
    ])
    def test_non_2xx_status(self, client, session, weather_body, status_code, reason):
        """Error scenario: Any non-2xx status → ApiRequestFailed, even with a parsable body."""
        session.get.return_value = make_response(status_code, weather_body, reason=reason)
        
        with pytest.raises(ApiRequestFailed) as exc_info:
            client.fetch_weather("Hoshiarpur")
        
        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == reason
        assert str(status_code) in str(exc_info.value)
    
    def test_2xx_other_than_200_accepted(self, client, session, weather_body):
        """Boundary: 203 is still a success."""
        session.get.return_value = make_response(203, weather_body, reason="Non-Authoritative Information")
        assert client.fetch_weather("Hoshiarpur").temperature_c == 40.0
    
    def test_city_not_found(self, client, session):
        """Error scenario: 404 for unknown location."""
        session.get.return_value = make_response(404, {"cod": "404", "message": "city not found"}, reason="Not Found")
        with pytest.raises(ApiRequestFailed) as exc_info:
            client.fetch_weather("Nowhereville")
        assert exc_info.value.status_code == 404
    
    def test_server_error(self, client, session):
        session.get.return_value = make_response(503, {}, reason="Service Unavailable")
        with pytest.raises(ApiRequestFailed) as exc_info:
            client.fetch_air_quality(0.0, 0.0)
        assert exc_info.value.status_code == 503
    
    @pytest.mark.parametrize("error", [
        requests.exceptions.Timeout("read timed out"),
        requests.exceptions.ConnectionError("connection reset by peer"),
    ])
    def test_transport_error(self, client, session, error):
        """Error scenario: Transport failure → ApiRequestFailed without status."""
        session.get.side_effect = error
        
        with pytest.raises(ApiRequestFailed) as exc_info:
            client.fetch_weather("Hoshiarpur")
        
        assert exc_info.value.status_code is None
        assert exc_info.value.__cause__ is error
    
    def test_non_json_body(self, client, session):
        """Error scenario: 200 with HTML body → MalformedResponse."""
        session.get.return_value = make_response(text="<html>oops</html>")
        with pytest.raises(MalformedResponse):
            client.fetch_weather("Hoshiarpur")
    
    def test_missing_field_propagates(self, client, session, weather_body):
        del weather_body["wind"]
        session.get.return_value = make_response(body=weather_body)
        with pytest.raises(MalformedResponse):
            client.fetch_weather("Hoshiarpur")
    
    def test_empty_air_quality_list(self, client, session):
        session.get.return_value = make_response(body={"list": []})
        with pytest.raises(EmptyResult):
            client.fetch_air_quality(1.0, 2.0)
    
    def test_missing_api_key(self, session, monkeypatch):
        """Error scenario: No API key → ApiRequestFailed before any request."""
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        client = OpenWeatherClient(session=session)
        
        with pytest.raises(ApiRequestFailed, match="OPENWEATHER_API_KEY"):
            client.fetch_weather("Hoshiarpur")
        session.get.assert_not_called()
    
    def test_api_key_read_from_environment(self, session, monkeypatch, weather_body):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        session.get.return_value = make_response(body=weather_body)
        OpenWeatherClient(session=session).fetch_weather("Hoshiarpur")
        assert session.get.call_args.kwargs["params"]["appid"] == "env-key"
    
    @pytest.mark.parametrize("location", ["", "   ", None])
    def test_blank_location(self, client, session, location):
        """Error scenario: Blank location → InvalidInput, no request."""
        with pytest.raises(InvalidInput):
            client.fetch_weather(location)
        session.get.assert_not_called()
