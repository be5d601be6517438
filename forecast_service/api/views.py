"""REST API views for forecast information."""
from __future__ import annotations

import logging
from functools import lru_cache

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from forecast_service.core.exceptions import CoordinateError, UpstreamError
from forecast_service.core.providers.nws import NwsForecastClient
from forecast_service.core.services.forecast_service import ForecastService


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_forecast_service() -> ForecastService:
    client = NwsForecastClient(
        base_url=settings.NWS_BASE_URL,
        user_agent=settings.NWS_USER_AGENT,
        timeout=settings.NWS_TIMEOUT,
    )
    return ForecastService(client=client)


def parse_coordinates(query_params) -> tuple[float, float]:
    """Read ``latitude``/``longitude`` from the query string.

    Raises :class:`CoordinateError` when a value is missing or not a number.
    Range checks happen in the service.
    """

    try:
        raw_latitude = query_params["latitude"]
        raw_longitude = query_params["longitude"]
    except KeyError as exc:
        raise CoordinateError("latitude and longitude query parameters are required.") from exc
    try:
        return float(raw_latitude), float(raw_longitude)
    except ValueError as exc:
        raise CoordinateError("latitude and longitude must be valid numbers.") from exc


class ForecastView(APIView):
    """Provide a simplified forecast for requested coordinates."""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the current forecast period for the specified coordinates."""
        try:
            latitude, longitude = parse_coordinates(request.query_params)
            result = get_forecast_service().get_forecast(latitude=latitude, longitude=longitude)
        except CoordinateError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except UpstreamError as exc:
            logger.warning("Upstream forecast failure: %s", exc)
            return Response({"error": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(result.to_payload(), status=status.HTTP_200_OK)
