from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from forecast_fixtures import StubClient
from forecast_service.api.management.commands.forecast_fetch import Command
from forecast_service.core.abstractions import ForecastPeriod


def test_forecast_fetch_prints_payload(install_service) -> None:
    install_service(StubClient(ForecastPeriod(short_forecast="Chance Showers", temperature=50)))
    out = StringIO()

    call_command(Command(), lat=39.7456, lon=-97.0892, stdout=out)

    assert json.loads(out.getvalue()) == {
        "latitude": 39.7456,
        "longitude": -97.0892,
        "shortForecast": "Chance Showers",
        "temperatureF": 50,
        "temperatureCharacterization": "cold",
    }


def test_forecast_fetch_reports_upstream_failure(install_service) -> None:
    install_service(StubClient(error="NWS error"))

    with pytest.raises(CommandError, match="NWS error"):
        call_command(Command(), lat=0.0, lon=0.0, stdout=StringIO())


def test_forecast_fetch_rejects_out_of_range_coordinates(install_service) -> None:
    stub = StubClient(ForecastPeriod(short_forecast="Sunny", temperature=70))
    install_service(stub)

    with pytest.raises(CommandError, match="Latitude"):
        call_command(Command(), lat=123.0, lon=0.0, stdout=StringIO())

    assert stub.calls == []
