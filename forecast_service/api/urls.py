"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from forecast_service.api.views import ForecastView

urlpatterns = [
    path("forecast", ForecastView.as_view(), name="forecast"),
]
