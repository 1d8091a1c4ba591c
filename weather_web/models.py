"""
Pydantic models for the OpenWeatherMap payload and the rendered page.
"""

import math
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


def round_half_away(value: float) -> float:
    """Round to a whole number, halves going away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Coord(_Payload):
    lon: float
    lat: float


class Main(_Payload):
    """Temperature block, in the units the request asked for."""

    feels_like: float
    temp: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int

    def rounded(self) -> "Main":
        return self.model_copy(
            update={
                "feels_like": round_half_away(self.feels_like),
                "temp": round_half_away(self.temp),
                "temp_min": round_half_away(self.temp_min),
                "temp_max": round_half_away(self.temp_max),
            }
        )


class Sys(_Payload):
    country: str = ""
    id: Optional[int] = None
    sunrise: int
    sunset: int


class WeatherCondition(_Payload):
    id: int
    main: str = Field(..., description="Short category, e.g. Clouds")
    description: str
    icon: str


class Wind(_Payload):
    deg: int = 0
    speed: float


class WeatherAPIResponse(_Payload):
    """Model for the OpenWeatherMap current weather response."""

    base: str = ""
    clouds: Dict[str, int] = Field(default_factory=dict)
    cod: int
    coord: Coord
    dt: int = Field(..., description="Data calculation time")
    id: int
    main: Main
    name: str = Field(..., description="City name")
    sys: Sys
    timezone: int = 0
    visibility: int = 0
    weather: List[WeatherCondition] = Field(..., min_length=1)
    wind: Wind

    @property
    def condition(self) -> WeatherCondition:
        """Primary weather condition."""
        return self.weather[0]

    def with_rounded_temperatures(self) -> "WeatherAPIResponse":
        return self.model_copy(update={"main": self.main.rounded()})


class EmptyPage(BaseModel):
    """Page before any search was submitted."""

    kind: Literal["empty"] = "empty"

    @property
    def error(self) -> bool:
        return False

    @property
    def weather(self) -> None:
        return None


class WeatherPage(BaseModel):
    """Page showing the conditions for one city."""

    kind: Literal["weather"] = "weather"
    weather: WeatherAPIResponse
    icon_url: str

    @property
    def error(self) -> bool:
        return False


class ErrorPage(BaseModel):
    """Page shown when the search could not be answered."""

    kind: Literal["error"] = "error"
    reason: str

    @property
    def error(self) -> bool:
        return True

    @property
    def weather(self) -> None:
        return None


PageView = Annotated[
    Union[EmptyPage, WeatherPage, ErrorPage], Field(discriminator="kind")
]
