"""Weather and city clients for the demo table and the live backend."""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from app.config import Settings, get_settings
from app.logging_config import logger
from app.models.city import City, Coordinates
from app.weather_service.dummy_data import CITIES_DATA
from app.weather_service.transport import HttpTransport

ONECALL_PATH = "/onecall"
ONECALL_EXCLUDE = "current,minutely,alerts"
ONECALL_UNITS = "metric"
CITY_SEARCH_LIMIT = 10


def onecall_params(coordinates: Coordinates, api_key: str) -> dict:
    """Build the one-call query parameters for a coordinate pair."""
    return {
        "lat": coordinates.lat,
        "lon": coordinates.lon,
        "exclude": ONECALL_EXCLUDE,
        "units": ONECALL_UNITS,
        "appid": api_key,
    }


class WeatherClient(ABC):
    """Base client: a favorited-cities source plus a city resolver.

    Subclasses decide where favorited cities come from and how the
    argument of ``get_weather_by_city`` turns into coordinates.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.weather_api = HttpTransport(
            base_url=self.settings.weather_base_url, transport=transport
        )

    @abstractmethod
    async def get_favorited_cities(self) -> list:
        """Return the favorited cities."""

    @abstractmethod
    def resolve_coordinates(self, target) -> Coordinates:
        """Turn the weather lookup argument into coordinates."""

    async def get_weather_by_city(self, target) -> Optional[Any]:
        """Fetch the daily and hourly forecast for a location.

        Args:
            target: Location accepted by ``resolve_coordinates``, or None.

        Returns:
            The decoded one-call body, or None when ``target`` is absent.
        """
        if target is None:
            return None
        coordinates = self.resolve_coordinates(target)
        logger.info("WEATHER_REQUEST", lat=coordinates.lat, lon=coordinates.lon)
        return await self.weather_api.get(
            ONECALL_PATH, params=onecall_params(coordinates, self.settings.api_key)
        )


class DemoWeatherClient(WeatherClient):
    """Client serving favorited cities from the static table."""

    async def get_favorited_cities(self) -> list[City]:
        return list(CITIES_DATA.values())

    def resolve_coordinates(self, target) -> Coordinates:
        # Coordinates, City, or a plain {"lat", "lon"} mapping.
        return Coordinates.model_validate(target, from_attributes=True)


class LiveWeatherClient(WeatherClient):
    """Client reading cities from the backend API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(settings=settings, transport=transport)
        # Fully-qualified URLs are built per call for the backend.
        self.backend_api = HttpTransport(transport=transport)

    async def get_favorited_cities(self) -> list:
        """Fetch the favorited cities from the backend API.

        Returns:
            The decoded response body.
        """
        logger.info("FAVORITED_CITIES_REQUEST")
        return await self.backend_api.get(
            f"{self.settings.backend_base_url}/favoritedCities"
        )

    async def get_cities(self, keyword: str) -> list:
        """Search cities whose name contains ``keyword``.

        Args:
            keyword: Free-form search text; URL-encoded, not validated.

        Returns:
            The decoded response body, at most ten cities.
        """
        logger.info("CITY_SEARCH_REQUEST", keyword=keyword)
        return await self.backend_api.get(
            f"{self.settings.backend_base_url}/cities",
            params={"city_name_like": keyword, "_limit": CITY_SEARCH_LIMIT},
        )

    def resolve_coordinates(self, target) -> Coordinates:
        # Backend results are decoded JSON, not City instances.
        return City.model_validate(target, from_attributes=True).coordinates


def demo_client() -> DemoWeatherClient:
    return DemoWeatherClient()


def live_client() -> LiveWeatherClient:
    return LiveWeatherClient()
