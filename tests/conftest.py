"""
Pytest configuration and shared fixtures.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "test_openweather_api_key_123"


@pytest.fixture
def openweather_payload() -> dict:
    """OpenWeatherMap current weather response for New York, imperial units."""
    return {
        "coord": {"lon": -74.006, "lat": 40.7143},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "base": "stations",
        "main": {
            "temp": 68.54,
            "feels_like": 67.5,
            "temp_min": 65.5,
            "temp_max": 71.49,
            "pressure": 1015,
            "humidity": 52,
        },
        "visibility": 10000,
        "wind": {"speed": 8.05, "deg": 230},
        "clouds": {"all": 0},
        "dt": 1697544000,
        "sys": {
            "type": 2,
            "id": 2039034,
            "country": "US",
            "sunrise": 1697540881,
            "sunset": 1697580505,
        },
        "timezone": -14400,
        "id": 5128581,
        "name": "New York",
        "cod": 200,
    }


@pytest.fixture
def openweather_body(openweather_payload) -> bytes:
    return json.dumps(openweather_payload).encode()


@pytest.fixture
def mock_session():
    """
    Build a stand-in for aiohttp.ClientSession.

    Returns a factory taking the response status and body (or exceptions for
    the request and the body read) and returning (session_class, session).
    Patch ``aiohttp.ClientSession`` with session_class.
    """

    def _build(status=200, body=b"", get_error=None, read_error=None):
        response = MagicMock()
        response.status = status
        response.read = AsyncMock(return_value=body, side_effect=read_error)

        session = MagicMock()
        if get_error is not None:
            session.get.side_effect = get_error
        else:
            session.get.return_value.__aenter__.return_value = response
            session.get.return_value.__aexit__ = AsyncMock(return_value=False)

        session_class = MagicMock()
        session_class.return_value.__aenter__.return_value = session
        return session_class, session

    return _build
