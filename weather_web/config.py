"""
Configuration constants for the weather web front end.

Values are read once, when this module is first imported. A local ``.env``
file is loaded before the environment is read.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class ExternalAPIConfig:
    """External API configuration"""

    OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
    OPENWEATHER_ICON_URL = "http://openweathermap.org/img/w/{icon}.png"
    OPENWEATHER_UNITS = "imperial"
    OPENWEATHER_TIMEOUT = float(os.getenv("OPENWEATHER_TIMEOUT", "10"))


class AppConfig:
    """Application configuration"""

    # Environment variables
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # Temperatures come back with decimals; whole numbers read better on the page
    ROUND_TEMPERATURES = _env_flag("ROUND_TEMPERATURES", "true")

    TEMPLATE_DIR = os.getenv("TEMPLATE_DIR", str(PACKAGE_DIR / "templates"))
    STATIC_DIR = os.getenv("STATIC_DIR", str(PACKAGE_DIR / "css"))

    OPENWEATHER_API_KEY = os.getenv("API_KEY") or os.getenv("OPENWEATHER_API_KEY", "")
