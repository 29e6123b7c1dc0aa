"""FastAPI application routes, middleware, and metrics."""

import time
import uuid
from typing import Any, Optional

import httpx
from fastapi import Body, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from app.health.health_check import is_backend_api_available, is_weather_api_available
from app.logging_config import logger
from app.metrics import observe_request, render_latest
from app.models.city import City, Coordinates
from app.models.health import Dependencies, HealthResponse
from app.weather_service.weather import demo_client, live_client
from structlog.contextvars import bind_contextvars, clear_contextvars

app = FastAPI()


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Bind a request ID to every log line of the request and record metrics.

    The ID comes from ``x-request-id`` when the caller sends one and is
    echoed back on the response. Upstream calls made while handling the
    request log under the same ID.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    path = request.url.path
    bind_contextvars(request_id=request_id, route=f"{request.method} {path}")
    start = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["x-request-id"] = request_id
        return response
    finally:
        elapsed = time.perf_counter() - start
        logger.info(
            "HTTP_REQUEST", status_code=status_code, duration_ms=round(elapsed * 1000, 2)
        )
        observe_request(request.method, path, status_code, elapsed)
        clear_contextvars()


@app.exception_handler(httpx.HTTPStatusError)
async def upstream_status_error_handler(request: Request, exc: httpx.HTTPStatusError):
    """Convert upstream non-2xx responses into 502 responses.

    Args:
        request: Incoming HTTP request.
        exc: Raised upstream status error.

    Returns:
        A JSON response naming the upstream status.
    """
    return JSONResponse(
        status_code=502,
        content={"detail": f"Upstream returned {exc.response.status_code}"},
    )


@app.exception_handler(httpx.RequestError)
async def upstream_request_error_handler(request: Request, exc: httpx.RequestError):
    """Convert upstream network failures into 504 responses."""
    return JSONResponse(status_code=504, content={"detail": "Upstream unreachable"})


@app.get("/demo/favorited-cities")
async def get_demo_favorited_cities() -> list[City]:
    """Return the static favorited cities."""
    return await demo_client().get_favorited_cities()


@app.get("/demo/weather")
async def get_demo_weather(
    lat: Optional[float] = None, lon: Optional[float] = None
) -> Any:
    """Fetch the forecast for a coordinate pair.

    Args:
        lat: Latitude query parameter.
        lon: Longitude query parameter.

    Returns:
        The upstream forecast body, or null when a coordinate is missing.
    """
    coordinates = None
    if lat is not None and lon is not None:
        coordinates = Coordinates(lat=lat, lon=lon)
    return await demo_client().get_weather_by_city(coordinates)


@app.get("/favorited-cities")
async def get_favorited_cities() -> Any:
    """Return the favorited cities from the backend API."""
    return await live_client().get_favorited_cities()


@app.get("/cities")
async def get_cities(keyword: str) -> Any:
    """Search cities by name for autocomplete."""
    return await live_client().get_cities(keyword)


@app.post("/weather")
async def get_weather_for_city(city: Optional[City] = Body(default=None)) -> Any:
    """Fetch the forecast for a city record.

    Args:
        city: City JSON body, or null.

    Returns:
        The upstream forecast body, or null when no city is given.
    """
    return await live_client().get_weather_by_city(city)


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report API health and dependency availability.

    Returns:
        A HealthResponse containing dependency status.
    """
    return HealthResponse(
        status="ok",
        dependencies=Dependencies(
            weather_api=await is_weather_api_available(),
            backend_api=await is_backend_api_available(),
        ),
    )


@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics for scraping."""
    body, media_type = render_latest()
    return Response(body, media_type=media_type)
