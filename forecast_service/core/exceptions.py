"""Errors raised by the forecast domain."""
from __future__ import annotations


class ForecastError(RuntimeError):
    """Base forecast error."""


class CoordinateError(ForecastError, ValueError):
    """Raised when a latitude or longitude is outside its valid range."""


class UpstreamError(ForecastError):
    """Raised when the weather provider fails or returns unusable data."""


__all__ = ["ForecastError", "CoordinateError", "UpstreamError"]
