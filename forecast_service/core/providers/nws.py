"""National Weather Service forecast client.

The NWS API resolves a forecast in two steps:

1. ``GET /points/{lat},{lon}`` returns grid point metadata including the
   forecast URL for that grid cell.
2. ``GET {forecast URL}`` returns the forecast as an ordered list of periods
   ("Today", "Tonight", ...).

The first period is always the current or next one. In the evening that is
a nighttime period; it is returned as is rather than skipping ahead to the
next daytime period.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from forecast_service.core.abstractions import ForecastPeriod, GridPointMetadata
from forecast_service.core.exceptions import UpstreamError
from forecast_service.core.providers.base import HttpProvider, RequestConfig

DEFAULT_USER_AGENT = "(forecast-service, contact@example.com)"
GEO_JSON = "application/geo+json"


class NwsForecastClient(HttpProvider):
    base_url = "https://api.weather.gov"

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 5.0,
        **kwargs,
    ) -> None:
        kwargs.setdefault(
            "request_config",
            RequestConfig(
                timeout=timeout,
                headers={"User-Agent": user_agent, "Accept": GEO_JSON},
            ),
        )
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def fetch_forecast(self, latitude: float, longitude: float) -> ForecastPeriod:
        metadata = self.resolve_grid_point(latitude, longitude)
        try:
            response = self._request("GET", metadata.forecast_url)
            data = self._json(response)
        except UpstreamError as exc:
            raise UpstreamError(f"Failed to fetch forecast from NWS. Detail: {exc}") from exc
        period = parse_first_period(data)
        self._log.debug(
            "Using forecast period %r (daytime=%s) for %.4f,%.4f",
            period.name,
            period.is_daytime,
            latitude,
            longitude,
        )
        return period

    def resolve_grid_point(self, latitude: float, longitude: float) -> GridPointMetadata:
        url = f"{self.base_url}/points/{latitude:.4f},{longitude:.4f}"
        try:
            response = self._request("GET", url)
            data = self._json(response)
        except UpstreamError as exc:
            raise UpstreamError(
                "Failed to resolve grid point from NWS. The coordinates may be outside US coverage. "
                f"Detail: {exc}"
            ) from exc
        return parse_grid_point(data)


def parse_grid_point(data: Mapping[str, Any]) -> GridPointMetadata:
    properties = data.get("properties")
    forecast_url = properties.get("forecast") if isinstance(properties, Mapping) else None
    if not isinstance(forecast_url, str) or not forecast_url:
        raise UpstreamError("NWS did not return a forecast URL for the given coordinates.")
    return GridPointMetadata(forecast_url=forecast_url)


def parse_first_period(data: Mapping[str, Any]) -> ForecastPeriod:
    properties = data.get("properties")
    periods = properties.get("periods") if isinstance(properties, Mapping) else None
    if not isinstance(periods, list) or not periods:
        raise UpstreamError("NWS returned no forecast periods.")
    return parse_period(periods[0])


def parse_period(raw: Any) -> ForecastPeriod:
    if not isinstance(raw, Mapping):
        raise UpstreamError("NWS returned a malformed forecast period.")
    short_forecast = raw.get("shortForecast")
    temperature = raw.get("temperature")
    if not isinstance(short_forecast, str):
        raise UpstreamError("NWS forecast period has no short forecast.")
    # bool is an int subclass but never a temperature.
    if not isinstance(temperature, int) or isinstance(temperature, bool):
        raise UpstreamError("NWS forecast period has no integer temperature.")
    name = raw.get("name")
    is_daytime = raw.get("isDaytime")
    return ForecastPeriod(
        short_forecast=short_forecast,
        temperature=temperature,
        name=name if isinstance(name, str) else None,
        is_daytime=is_daytime if isinstance(is_daytime, bool) else None,
    )


__all__ = [
    "NwsForecastClient",
    "DEFAULT_USER_AGENT",
    "parse_grid_point",
    "parse_first_period",
    "parse_period",
]
