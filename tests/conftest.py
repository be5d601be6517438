from __future__ import annotations

import pytest

from forecast_service.api import views
from forecast_service.api.management.commands import forecast_fetch
from forecast_service.core.services.forecast_service import ForecastService


@pytest.fixture
def install_service(monkeypatch):
    """Route the API view and CLI through a service backed by the given client."""

    def _install(client) -> ForecastService:
        service = ForecastService(client=client)
        monkeypatch.setattr(views, "get_forecast_service", lambda: service)
        monkeypatch.setattr(forecast_fetch, "get_forecast_service", lambda: service)
        return service

    return _install


@pytest.fixture
def real_service():
    """Use the settings-built service, dropping any instance cached by earlier tests."""

    views.get_forecast_service.cache_clear()
    yield views.get_forecast_service()
    views.get_forecast_service.cache_clear()
