"""Health checks for the weather API and the backend API."""

from typing import Optional

import httpx

from app.config import Settings, get_settings
from app.logging_config import logger
from app.models.city import Coordinates
from app.models.health import ServiceStatus
from app.models.weather import WeatherForecast
from app.weather_service.transport import HttpTransport
from app.weather_service.weather import ONECALL_PATH, onecall_params

PROBE_COORDINATES = Coordinates(lat=51.5, lon=0.12)


async def is_weather_api_available(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServiceStatus:
    """Check the weather API answers with a valid forecast.

    Returns:
        ServiceStatus.available when the probe parses, else not_available.
    """
    settings = settings or get_settings()
    weather_api = HttpTransport(base_url=settings.weather_base_url, transport=transport)
    try:
        data = await weather_api.get(
            ONECALL_PATH, params=onecall_params(PROBE_COORDINATES, settings.api_key)
        )
        WeatherForecast.from_api_response(data)
    except (httpx.HTTPError, ValueError) as exc:
        # pydantic.ValidationError is a ValueError.
        logger.error("WEATHER_API UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
    return ServiceStatus.available


async def is_backend_api_available(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServiceStatus:
    """Check the backend API serves the favorited cities.

    Returns:
        ServiceStatus.available when the backend responds, else not_available.
    """
    settings = settings or get_settings()
    backend_api = HttpTransport(transport=transport)
    try:
        await backend_api.get(f"{settings.backend_base_url}/favoritedCities")
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("BACKEND_API UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
    return ServiceStatus.available
