"""
Jinja2 template setup and filters for the weather page.
"""

from datetime import datetime, timedelta, timezone

from fastapi.templating import Jinja2Templates

from weather_web.config import AppConfig

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def localtime(timestamp: int, offset_seconds: int = 0) -> str:
    """Format a Unix timestamp as HH:MM at the given UTC offset."""
    tz = timezone(timedelta(seconds=offset_seconds))
    return datetime.fromtimestamp(timestamp, tz).strftime("%H:%M")


def compass(degrees: float) -> str:
    """Nearest 16-point compass direction for a wind bearing."""
    return COMPASS_POINTS[int((degrees % 360) / 22.5 + 0.5) % 16]


def fmt_number(value: float) -> str:
    """Drop the trailing .0 from whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


templates = Jinja2Templates(directory=AppConfig.TEMPLATE_DIR)
templates.env.filters["localtime"] = localtime
templates.env.filters["compass"] = compass
templates.env.filters["number"] = fmt_number
