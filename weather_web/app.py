"""
FastAPI application serving the weather search page.
"""

import logging

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_web.config import AppConfig
from weather_web.external_api import WeatherAPIError
from weather_web.models import EmptyPage, PageView
from weather_web.templating import templates
from weather_web.weather_service import WeatherService

NOT_FOUND_BODY = "404 page not found\nGo back to the root directory/path"

# Configure logging
logging.basicConfig(
    level=AppConfig.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

if not AppConfig.OPENWEATHER_API_KEY:
    logger.warning("API_KEY is not set; every search will be rejected upstream")


def get_weather_service() -> WeatherService:
    """Create the weather service for a request."""
    return WeatherService(AppConfig.OPENWEATHER_API_KEY)


# Initialize FastAPI app; docs routes are disabled so they fall under the 404 rule
app = FastAPI(
    title="Weather",
    description="Current weather by city",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Serves css files
app.mount("/css", StaticFiles(directory=AppConfig.STATIC_DIR), name="css")


def render(request: Request, page: PageView) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"page": page})


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the search page with no results."""
    return render(request, EmptyPage())


@app.post("/", response_class=HTMLResponse)
async def submit_search(
    request: Request,
    search: str = Form(""),
    service: WeatherService = Depends(get_weather_service),
):
    """
    Look up the weather for the submitted city and render it.

    Args:
        search: City name from the form

    Returns:
        The rendered page, or a plain-text 500 if the upstream
        response could not be read or parsed
    """
    try:
        page = await service.search(search)
    except WeatherAPIError as e:
        logger.error("Weather lookup failed for %r: %s (%s)", search, e, e.kind.value)
        return PlainTextResponse(e.message, status_code=500)

    return render(request, page)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):  # pylint: disable=unused-argument
    """Plain-text bodies for routing errors."""
    if exc.status_code == 404:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):  # pylint: disable=unused-argument
    """Global exception handler for unhandled errors."""
    logger.error("Unhandled exception: %s", str(exc))
    return PlainTextResponse("Internal Server Error", status_code=500)
