"""Raw sensor counts to engineering units."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cluster_dash.config.settings import ConfigurationError
from cluster_dash.models.readings import PhysicalReading, SensorSample

if TYPE_CHECKING:
    from cluster_dash.config.settings import ClusterSettings


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp value into [lo, hi]; bounds may be given in either order."""
    if lo > hi:
        lo, hi = hi, lo
    return max(lo, min(hi, value))


def map_linear(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """
    Map value from [in_min, in_max] onto [out_min, out_max] and clamp.

    Integer interpolation truncating toward zero. Either range may be
    reversed; the result is clamped to the output range whichever way round
    it is given.

    Raises:
        ConfigurationError: if in_min == in_max
    """
    if in_min == in_max:
        raise ConfigurationError(f"input range has equal bounds ({in_min})")

    num = (value - in_min) * (out_max - out_min)
    den = in_max - in_min
    # Truncate toward zero, unlike //
    step = abs(num) // abs(den)
    if (num < 0) != (den < 0):
        step = -step
    mapped = step + out_min
    return clamp(mapped, out_min, out_max)


def adc_to_coolant_c(raw: int, settings: ClusterSettings) -> int:
    """Convert a coolant sender ADC count to °C."""
    return map_linear(
        raw,
        settings.coolant_adc_min,
        settings.coolant_adc_max,
        settings.coolant_c_min,
        settings.coolant_c_max,
    )


def adc_to_fuel_liters(raw: int, settings: ClusterSettings) -> int:
    """Convert a fuel sender ADC count to liters."""
    return map_linear(
        raw,
        settings.fuel_adc_min,
        settings.fuel_adc_max,
        settings.fuel_liters_min,
        settings.fuel_liters_max,
    )


def calibrate(sample: SensorSample, settings: ClusterSettings) -> PhysicalReading:
    return PhysicalReading(
        coolant_c=adc_to_coolant_c(sample.coolant_raw, settings),
        fuel_liters=adc_to_fuel_liters(sample.fuel_raw, settings),
    )
