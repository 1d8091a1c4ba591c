"""
External API client for OpenWeatherMap service.
"""

import asyncio
import enum
import logging
from typing import Optional
from urllib.parse import quote_plus

import aiohttp
from pydantic import ValidationError

from weather_web.config import ExternalAPIConfig
from weather_web.models import WeatherAPIResponse

logger = logging.getLogger(__name__)


class FetchErrorKind(str, enum.Enum):
    """Stage at which fetching weather data failed."""

    TRANSPORT = "transport"
    UPSTREAM_STATUS = "upstream_status"
    UNREADABLE_BODY = "unreadable_body"
    INVALID_PAYLOAD = "invalid_payload"


class WeatherAPIError(Exception):
    """Custom exception for weather API errors."""

    def __init__(
        self,
        message: str,
        kind: FetchErrorKind,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        super().__init__(message)

    @property
    def recoverable(self) -> bool:
        """Whether the page can still be rendered with an error message."""
        return self.kind in (FetchErrorKind.TRANSPORT, FetchErrorKind.UPSTREAM_STATUS)


def escape_search(search: str) -> str:
    """
    Escape a city name for the ``q`` query parameter.

    OpenWeatherMap represents spaces as ``+``, e.g. "Los Angeles" becomes
    "Los+Angeles". Other reserved characters are percent-encoded.
    """
    return quote_plus(search)


class OpenWeatherMapClient:
    """
    Asynchronous client for the OpenWeatherMap current weather endpoint.
    """

    def __init__(self, api_key: str, timeout: Optional[float] = None):
        """
        Initialize the OpenWeatherMap client.

        Args:
            api_key: OpenWeatherMap API key
            timeout: Request timeout in seconds (defaults to config value)
        """
        self.api_key = api_key
        self.base_url = ExternalAPIConfig.OPENWEATHER_BASE_URL
        self.units = ExternalAPIConfig.OPENWEATHER_UNITS
        self.timeout = aiohttp.ClientTimeout(
            total=timeout or ExternalAPIConfig.OPENWEATHER_TIMEOUT
        )

    def build_url(self, search: str) -> str:
        return (
            f"{self.base_url}/weather?q={escape_search(search)}"
            f"&units={self.units}&appid={self.api_key}"
        )

    def _redacted(self, url: str) -> str:
        if not self.api_key:
            return url
        return url.replace(self.api_key, "***")

    async def get_weather(self, search: str) -> WeatherAPIResponse:
        """
        Get current weather data for a city.

        Args:
            search: City name as typed by the user

        Returns:
            WeatherAPIResponse: Parsed weather data

        Raises:
            WeatherAPIError: If the request fails or the payload is unusable
        """
        url = self.build_url(search)
        logger.debug("Requesting weather data: %s", self._redacted(url))

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url) as response:
                    if response.status >= 400:
                        raise self._status_error(search, response.status)

                    try:
                        body = await response.read()
                    except (aiohttp.ClientPayloadError, asyncio.TimeoutError) as e:
                        logger.error(
                            "Failed to read API response for %s: %s",
                            search,
                            self._redacted(str(e)),
                        )
                        raise WeatherAPIError(
                            "Failed to read API response",
                            FetchErrorKind.UNREADABLE_BODY,
                            status_code=response.status,
                        ) from e
        except WeatherAPIError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(
                "Network error fetching weather for %s: %s",
                search,
                self._redacted(str(e)),
            )
            raise WeatherAPIError(
                "Weather service unavailable", FetchErrorKind.TRANSPORT
            ) from e

        try:
            weather = WeatherAPIResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to parse API response for %s: %s", search, e)
            raise WeatherAPIError(
                "Failed to parse API response", FetchErrorKind.INVALID_PAYLOAD
            ) from e

        logger.debug("Successfully fetched weather for %s", search)
        return weather

    @staticmethod
    def _status_error(search: str, status: int) -> WeatherAPIError:
        if status == 404:
            error_msg = f"City '{search}' not found"
            logger.warning(error_msg)
        elif status == 401:
            error_msg = "Invalid API key"
            logger.error(error_msg)
        else:
            error_msg = "Weather service unavailable"
            logger.warning("API error for %s (status: %d)", search, status)
        return WeatherAPIError(
            error_msg, FetchErrorKind.UPSTREAM_STATUS, status_code=status
        )
