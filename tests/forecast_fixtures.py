"""Shared NWS payload builders and a forecast client double."""
from __future__ import annotations

from typing import List, Optional, Tuple

from forecast_service.core.abstractions import ForecastPeriod
from forecast_service.core.exceptions import UpstreamError

NWS_BASE = "https://nws.test"
FORECAST_URL = "https://nws.test/gridpoints/TOP/32,81/forecast"


class StubClient:
    """Forecast client double recording the coordinates it was asked for."""

    def __init__(self, period: Optional[ForecastPeriod] = None, error: Optional[str] = None) -> None:
        self._period = period
        self._error = error
        self.calls: List[Tuple[float, float]] = []

    def fetch_forecast(self, latitude: float, longitude: float) -> ForecastPeriod:
        self.calls.append((latitude, longitude))
        if self._error is not None:
            raise UpstreamError(self._error)
        assert self._period is not None
        return self._period


def points_payload(forecast_url: str = FORECAST_URL) -> dict:
    return {
        "properties": {
            "gridId": "TOP",
            "gridX": 32,
            "gridY": 81,
            "forecast": forecast_url,
        }
    }


def forecast_payload(*periods: dict) -> dict:
    return {"properties": {"periods": list(periods)}}


def period(name: str = "Today", short_forecast: str = "Mostly Sunny", temperature: int = 72, **extra) -> dict:
    return {
        "number": 1,
        "name": name,
        "isDaytime": name != "Tonight",
        "temperature": temperature,
        "temperatureUnit": "F",
        "shortForecast": short_forecast,
        **extra,
    }
