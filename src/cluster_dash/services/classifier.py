"""Threshold classification of calibrated readings."""

from __future__ import annotations

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.display import (
    COOLANT_COLD,
    HUE_GREEN,
    HUE_RED,
    STATUS_CRITICAL,
    Color,
)
from cluster_dash.models.readings import (
    ChannelStatus,
    ClassifiedReadings,
    CoolantBand,
    OilStatus,
    PhysicalReading,
    SensorSample,
    Severity,
)
from cluster_dash.utils.calibration import map_linear

RAMP_LEVEL = 220  # Brightness of ramp-colored gauge fills


def ramp_color(value: int, lo: int, hi: int, hue_lo: int, hue_hi: int) -> Color:
    """Hue interpolated across [lo, hi], endpoints inclusive."""
    return Color(map_linear(value, lo, hi, hue_lo, hue_hi), RAMP_LEVEL)


def classify_oil(oil_switch: bool, settings: ClusterSettings) -> OilStatus:
    if oil_switch == settings.oil_critical_level:
        return OilStatus.CRITICAL
    return OilStatus.OK


def classify_coolant(coolant_c: int, settings: ClusterSettings) -> ChannelStatus:
    """
    Band the coolant temperature.

    Below the normal minimum the gauge is drawn in the cold color. Inside
    [normal_min, critical] the hue ramps from green to red, reaching full red
    at exactly the critical temperature. Only temperatures strictly above the
    critical threshold are CRITICAL, so the alert does not flicker while the
    reading sits on the boundary.
    """
    if coolant_c > settings.coolant_critical_c:
        return ChannelStatus(Severity.CRITICAL, STATUS_CRITICAL, CoolantBand.HOT)

    if coolant_c < settings.coolant_normal_min_c:
        return ChannelStatus(Severity.NORMAL, COOLANT_COLD, CoolantBand.COLD)

    color = ramp_color(
        coolant_c,
        settings.coolant_normal_min_c,
        settings.coolant_critical_c,
        HUE_GREEN,
        HUE_RED,
    )
    severity = Severity.WARNING if coolant_c >= settings.coolant_warn_c else Severity.NORMAL
    return ChannelStatus(severity, color, CoolantBand.NORMAL)


def classify_fuel(fuel_liters: int, settings: ClusterSettings) -> ChannelStatus:
    """Fuel at or below the critical level is CRITICAL; otherwise red-to-green ramp."""
    if fuel_liters <= settings.fuel_critical_liters:
        return ChannelStatus(Severity.CRITICAL, STATUS_CRITICAL)

    color = ramp_color(
        fuel_liters,
        settings.fuel_critical_liters,
        settings.fuel_liters_max,
        HUE_RED,
        HUE_GREEN,
    )
    severity = Severity.WARNING if fuel_liters <= settings.fuel_reserve_liters else Severity.NORMAL
    return ChannelStatus(severity, color)


def classify(
    sample: SensorSample, reading: PhysicalReading, settings: ClusterSettings
) -> ClassifiedReadings:
    return ClassifiedReadings(
        oil=classify_oil(sample.oil_switch, settings),
        coolant=classify_coolant(reading.coolant_c, settings),
        fuel=classify_fuel(reading.fuel_liters, settings),
    )
