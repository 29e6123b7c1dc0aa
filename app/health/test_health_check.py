import httpx
import pytest

from app.conftest import BACKEND_CITIES, FORECAST_BODY
from app.health.health_check import is_backend_api_available, is_weather_api_available
from app.models.health import ServiceStatus


@pytest.mark.asyncio
async def test_weather_api_available(settings, upstream):
    upstream.route("/data/2.5/onecall", json=FORECAST_BODY)
    status = await is_weather_api_available(settings, transport=upstream.transport)
    assert status == ServiceStatus.available


@pytest.mark.asyncio
async def test_weather_api_unexpected_payload(settings, upstream):
    upstream.route("/data/2.5/onecall", json={"unexpected": True})
    status = await is_weather_api_available(settings, transport=upstream.transport)
    assert status == ServiceStatus.not_available


@pytest.mark.asyncio
async def test_weather_api_bad_status(settings, upstream):
    upstream.route("/data/2.5/onecall", status_code=401, json={"cod": 401})
    status = await is_weather_api_available(settings, transport=upstream.transport)
    assert status == ServiceStatus.not_available


@pytest.mark.asyncio
async def test_backend_api_available(settings, upstream):
    upstream.route("/favoritedCities", json=BACKEND_CITIES)
    status = await is_backend_api_available(settings, transport=upstream.transport)
    assert status == ServiceStatus.available


@pytest.mark.asyncio
async def test_backend_api_unreachable(settings, upstream):
    upstream.route("/favoritedCities", exc=httpx.ConnectError)
    status = await is_backend_api_available(settings, transport=upstream.transport)
    assert status == ServiceStatus.not_available
