"""Management command to fetch a forecast using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from forecast_service.api.views import get_forecast_service
from forecast_service.core.exceptions import CoordinateError, UpstreamError


class Command(BaseCommand):
    help = "Fetch the current forecast period for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=float, required=True, help="Latitude")
        parser.add_argument("--lon", type=float, required=True, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            result = get_forecast_service().get_forecast(
                latitude=options["lat"],
                longitude=options["lon"],
            )
        except (CoordinateError, UpstreamError) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(result.to_payload()))
