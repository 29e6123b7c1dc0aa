"""Environment-driven settings for the weather and backend APIs."""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from app.logging_config import logger

DEFAULT_WEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_BACKEND_BASE_URL = "http://localhost:3000"
# Placeholder only; real deployments must set WEATHER_API_KEY.
DEFAULT_API_KEY = "demo"


class Settings(BaseModel):
    """Resolved configuration, built once at process start."""

    model_config = ConfigDict(frozen=True)

    weather_base_url: str = DEFAULT_WEATHER_BASE_URL
    backend_base_url: str = DEFAULT_BACKEND_BASE_URL
    api_key: str = DEFAULT_API_KEY

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Returns:
            Settings with every unset variable falling back to its default.
        """
        settings = cls(
            weather_base_url=os.getenv("WEATHER_API_BASE_URL", DEFAULT_WEATHER_BASE_URL),
            backend_base_url=os.getenv(
                "BACKEND_API_BASE_URL", DEFAULT_BACKEND_BASE_URL
            ).rstrip("/"),
            api_key=os.getenv("WEATHER_API_KEY", DEFAULT_API_KEY),
        )
        if settings.api_key == DEFAULT_API_KEY:
            logger.warning("WEATHER_API_KEY_PLACEHOLDER")
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings.from_env()
