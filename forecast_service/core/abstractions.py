"""Core abstractions for the forecast domain."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol

from forecast_service.core.exceptions import CoordinateError


class TemperatureCharacterization(str, Enum):
    HOT = "hot"
    COLD = "cold"
    MODERATE = "moderate"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A validated latitude/longitude pair."""

    latitude: float
    longitude: float

    @classmethod
    def validated(cls, latitude: float, longitude: float) -> "Coordinate":
        """Build a coordinate, raising :class:`CoordinateError` when out of range.

        Latitude is checked first so a request with both values out of range
        reports the latitude problem.
        """

        if not _within(latitude, 90.0):
            raise CoordinateError("Latitude must be between -90 and 90.")
        if not _within(longitude, 180.0):
            raise CoordinateError("Longitude must be between -180 and 180.")
        return cls(latitude=latitude, longitude=longitude)


@dataclass(frozen=True, slots=True)
class GridPointMetadata:
    """The part of the provider's grid point response we need."""

    forecast_url: str


@dataclass(frozen=True, slots=True)
class ForecastPeriod:
    """A single forecast period such as "Today" or "Tonight"."""

    short_forecast: str
    temperature: int
    name: Optional[str] = None
    is_daytime: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class ForecastResult:
    """Simplified forecast returned to API clients."""

    latitude: float
    longitude: float
    short_forecast: str
    temperature_f: int
    temperature_characterization: TemperatureCharacterization

    def to_payload(self) -> Dict[str, object]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "shortForecast": self.short_forecast,
            "temperatureF": self.temperature_f,
            "temperatureCharacterization": self.temperature_characterization.value,
        }


class ForecastClient(Protocol):
    """A data source capable of returning the current forecast period."""

    def fetch_forecast(self, latitude: float, longitude: float) -> ForecastPeriod:
        """Fetch the first forecast period for the provided coordinates."""
        ...


def _within(value: float, bound: float) -> bool:
    # NaN fails both comparisons.
    return -bound <= value <= bound


__all__ = [
    "TemperatureCharacterization",
    "Coordinate",
    "GridPointMetadata",
    "ForecastPeriod",
    "ForecastResult",
    "ForecastClient",
]
