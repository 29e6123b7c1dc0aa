"""City reference data models."""

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """Latitude/longitude pair needed to request weather."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class City(BaseModel):
    """City record served by the backend API or the demo table."""

    model_config = ConfigDict(frozen=True)

    city_id: int
    city_name: str
    state_code: str
    country_code: str
    country_full: str
    lat: float
    lon: float

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lon=self.lon)
