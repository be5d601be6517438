"""Temperature characterization."""
from __future__ import annotations

from forecast_service.core.abstractions import TemperatureCharacterization

HOT_THRESHOLD_F = 85
COLD_THRESHOLD_F = 50


def classify_temperature(temperature_f: int) -> TemperatureCharacterization:
    """Map a Fahrenheit temperature to a coarse label.

    Both thresholds are inclusive: 85 and above is hot, 50 and below is
    cold, anything in between is moderate.
    """

    if temperature_f >= HOT_THRESHOLD_F:
        return TemperatureCharacterization.HOT
    if temperature_f <= COLD_THRESHOLD_F:
        return TemperatureCharacterization.COLD
    return TemperatureCharacterization.MODERATE


__all__ = ["HOT_THRESHOLD_F", "COLD_THRESHOLD_F", "classify_temperature"]
