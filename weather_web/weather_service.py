"""
Weather service layer turning a search into a page view.
"""

import logging
from typing import Optional, Union

from weather_web.config import AppConfig, ExternalAPIConfig
from weather_web.external_api import OpenWeatherMapClient, WeatherAPIError
from weather_web.models import ErrorPage, WeatherAPIResponse, WeatherPage

logger = logging.getLogger(__name__)


def icon_url(weather: WeatherAPIResponse) -> str:
    """URL of the icon for the primary weather condition."""
    return ExternalAPIConfig.OPENWEATHER_ICON_URL.format(icon=weather.condition.icon)


class WeatherService:
    """
    Weather service that handles the search flow.
    """

    def __init__(self, api_key: str, round_temperatures: Optional[bool] = None):
        """
        Initialize the weather service.

        Args:
            api_key: OpenWeatherMap API key
            round_temperatures: Round temperatures to whole numbers
                (defaults to config value)
        """
        self.api_client = OpenWeatherMapClient(api_key)
        if round_temperatures is None:
            round_temperatures = AppConfig.ROUND_TEMPERATURES
        self.round_temperatures = round_temperatures

    async def search(self, search: str) -> Union[WeatherPage, ErrorPage]:
        """
        Look up the weather for a city and build the page for it.

        Transport failures and upstream error statuses become an ErrorPage.

        Args:
            search: City name as submitted in the form

        Returns:
            WeatherPage or ErrorPage

        Raises:
            WeatherAPIError: If the upstream body could not be read or parsed
        """
        logger.info("Weather search for %r", search)
        try:
            weather = await self.api_client.get_weather(search)
        except WeatherAPIError as e:
            if not e.recoverable:
                raise
            return ErrorPage(reason=e.message)

        return self._to_page(weather)

    def _to_page(self, weather: WeatherAPIResponse) -> WeatherPage:
        if self.round_temperatures:
            weather = weather.with_rounded_temperatures()
        return WeatherPage(weather=weather, icon_url=icon_url(weather))
