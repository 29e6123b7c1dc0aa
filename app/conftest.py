import httpx
import pytest

from app.config import Settings

WEATHER_BASE_URL = "https://weather.test/data/2.5"
BACKEND_BASE_URL = "http://backend.test"

FORECAST_BODY = {
    "lat": 51.5085,
    "lon": -0.1257,
    "timezone": "Europe/London",
    "timezone_offset": 0,
    "daily": [
        {
            "dt": 1704110400,
            "sunrise": 1704096362,
            "sunset": 1704124649,
            "moonrise": 1704148260,
            "moonset": 1704111360,
            "moon_phase": 0.67,
            "temp": {
                "day": 8.1,
                "min": 5.2,
                "max": 9.4,
                "night": 6.0,
                "eve": 7.3,
                "morn": 5.5,
            },
            "feels_like": {"day": 5.0, "night": 3.1, "eve": 4.6, "morn": 2.2},
            "pressure": 990,
            "humidity": 81,
            "dew_point": 5.0,
            "wind_speed": 7.2,
            "wind_deg": 230,
            "wind_gust": 14.1,
            "weather": [
                {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}
            ],
            "clouds": 100,
            "pop": 0.9,
            "rain": 3.2,
            "uvi": 0.4,
        }
    ],
    "hourly": [
        {
            "dt": 1704110400,
            "temp": 8.1,
            "feels_like": 5.0,
            "pressure": 990,
            "humidity": 81,
            "dew_point": 5.0,
            "uvi": 0.4,
            "clouds": 100,
            "visibility": 10000,
            "wind_speed": 7.2,
            "wind_deg": 230,
            "wind_gust": 14.1,
            "weather": [
                {"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04d"}
            ],
            "pop": 0.2,
        }
    ],
}

BACKEND_CITIES = [
    {
        "city_id": 2988507,
        "city_name": "Paris",
        "state_code": "11",
        "country_code": "FR",
        "country_full": "France",
        "lat": 48.85341,
        "lon": 2.3488,
    }
]


class FakeUpstream:
    """Records requests and answers them from per-path canned responses."""

    def __init__(self):
        self.requests = []
        self.routes = {}

    def route(self, path, status_code=200, json=None, exc=None):
        self.routes[path] = (status_code, json, exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            raise AssertionError(f"Unexpected URL: {request.url}")
        status_code, json, exc = self.routes[request.url.path]
        if exc is not None:
            raise exc(f"failed: {request.url}", request=request)
        return httpx.Response(status_code, json=json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings():
    return Settings(
        weather_base_url=WEATHER_BASE_URL,
        backend_base_url=BACKEND_BASE_URL,
        api_key="test-key",
    )


@pytest.fixture
def upstream():
    return FakeUpstream()
