"""
Development server for the weather page.
Run with: weather-web  (or python -m weather_web.server)
"""

import uvicorn

from weather_web.config import AppConfig


def main():
    print(f"Listening on port {AppConfig.PORT}")

    uvicorn.run(
        "weather_web.app:app",
        host=AppConfig.HOST,
        port=AppConfig.PORT,
        log_level=AppConfig.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
