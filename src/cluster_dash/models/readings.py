"""Per-frame sensor values and their classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cluster_dash.models.display import Color


@dataclass(frozen=True)
class SensorSample:
    """Raw readings for one frame tick."""

    oil_switch: bool  # Oil pressure switch level
    coolant_raw: int  # Coolant sender ADC count
    fuel_raw: int  # Fuel sender ADC count
    glow_button: bool = False  # Glow push-button level (True = pressed)


@dataclass(frozen=True)
class PhysicalReading:
    """Calibrated values, always inside their configured ranges."""

    coolant_c: int  # Coolant temperature (Celsius)
    fuel_liters: int  # Fuel in tank (liters)


class Severity(Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class OilStatus(Enum):
    OK = "ok"
    CRITICAL = "critical"


class CoolantBand(Enum):
    """Three-way coolant banding."""

    COLD = "cold"  # Below normal operating temperature (cosmetic only)
    NORMAL = "normal"  # Inside the color ramp
    HOT = "hot"  # Above the critical threshold


@dataclass(frozen=True)
class ChannelStatus:
    """Severity and gauge color for one analog channel."""

    severity: Severity
    color: Color
    band: Optional[CoolantBand] = None  # Coolant only

    @property
    def critical(self) -> bool:
        return self.severity is Severity.CRITICAL


@dataclass(frozen=True)
class ClassifiedReadings:
    """Status of all three channels for one frame."""

    oil: OilStatus
    coolant: ChannelStatus
    fuel: ChannelStatus

    @property
    def oil_critical(self) -> bool:
        return self.oil is OilStatus.CRITICAL

    @property
    def any_critical(self) -> bool:
        """True if any channel is critical; drives the whole-screen flash."""
        return self.oil_critical or self.coolant.critical or self.fuel.critical
