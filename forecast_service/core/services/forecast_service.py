"""Forecast service turning a provider period into the API result."""
from __future__ import annotations

import logging

from forecast_service.core.abstractions import Coordinate, ForecastClient, ForecastResult
from forecast_service.core.classifier import classify_temperature
from forecast_service.core.exceptions import UpstreamError


logger = logging.getLogger(__name__)


class ForecastService:
    """Validate coordinates, fetch the current period and characterize it.

    Nothing is cached: every call performs a full round trip through the
    client.
    """

    def __init__(self, client: ForecastClient) -> None:
        self._client = client

    @property
    def client(self) -> ForecastClient:
        return self._client

    def get_forecast(self, latitude: float, longitude: float) -> ForecastResult:
        coordinate = Coordinate.validated(latitude, longitude)
        period = self._client.fetch_forecast(coordinate.latitude, coordinate.longitude)

        short_forecast = getattr(period, "short_forecast", None)
        temperature = getattr(period, "temperature", None)
        if not isinstance(short_forecast, str):
            raise UpstreamError("Forecast period is missing a short forecast.")
        if not isinstance(temperature, int) or isinstance(temperature, bool):
            raise UpstreamError("Forecast period is missing an integer temperature.")

        characterization = classify_temperature(temperature)
        logger.info(
            "Forecast for %.4f,%.4f: %s, %sF (%s)",
            latitude,
            longitude,
            short_forecast,
            temperature,
            characterization.value,
        )
        # Echo the caller's coordinates, not whatever the provider normalized them to.
        return ForecastResult(
            latitude=latitude,
            longitude=longitude,
            short_forecast=short_forecast,
            temperature_f=temperature,
            temperature_characterization=characterization,
        )


__all__ = ["ForecastService"]
