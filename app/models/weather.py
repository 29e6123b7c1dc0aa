"""OpenWeatherMap one-call forecast models."""

from typing import Optional

from pydantic import BaseModel


class WeatherCondition(BaseModel):
    """Weather condition descriptor (id, group, description, icon)."""

    id: int
    main: str
    description: str
    icon: str


class DailyTemperature(BaseModel):
    day: float
    min: float
    max: float
    night: float
    eve: float
    morn: float


class DailyFeelsLike(BaseModel):
    day: float
    night: float
    eve: float
    morn: float


class WeatherDay(BaseModel):
    """One entry of the daily forecast."""

    dt: int
    sunrise: int
    sunset: int
    moonrise: int
    moonset: int
    moon_phase: float
    temp: DailyTemperature
    feels_like: DailyFeelsLike
    pressure: int
    humidity: int
    dew_point: float
    wind_speed: float
    wind_deg: int
    wind_gust: Optional[float] = None  # omitted upstream on calm days
    weather: list[WeatherCondition]
    clouds: int
    pop: float
    uvi: float


class WeatherHour(BaseModel):
    """One entry of the hourly forecast."""

    dt: int
    temp: float
    feels_like: float
    pressure: int
    humidity: int
    dew_point: float
    uvi: float
    clouds: int
    visibility: Optional[int] = None
    wind_speed: float
    wind_deg: int
    wind_gust: Optional[float] = None
    weather: list[WeatherCondition]
    pop: float


class WeatherForecast(BaseModel):
    """Body of the one-call endpoint with current, minutely and alerts excluded."""

    lat: float
    lon: float
    timezone: str
    timezone_offset: int
    daily: list[WeatherDay] = []
    hourly: list[WeatherHour] = []

    @classmethod
    def from_api_response(cls, api_data: dict) -> "WeatherForecast":
        """Create a WeatherForecast from the external API payload.

        Args:
            api_data: Decoded one-call response body.

        Returns:
            A populated WeatherForecast model.

        Raises:
            pydantic.ValidationError: If the payload does not match the shape.
        """
        return cls.model_validate(api_data)
