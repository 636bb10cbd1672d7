"""Timer state carried between frames, and the per-frame result."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cluster_dash.models.display import Color
from cluster_dash.models.readings import ClassifiedReadings, PhysicalReading, SensorSample


@dataclass(frozen=True)
class FlashPhase:
    """Blink oscillator state. Starts in the bright phase."""

    on: bool = True
    last_toggle_ms: int = 0


class GlowPhase(Enum):
    """Glow-plug countdown states."""

    IDLE = "idle"
    ACTIVE = "active"


@dataclass(frozen=True)
class GlowState:
    """
    Glow-plug preheat countdown.

    duration_s is fixed when the countdown starts, from the coolant
    temperature at that moment.
    """

    active: bool = False
    start_ms: int = 0
    duration_s: int = 0

    @property
    def phase(self) -> GlowPhase:
        return GlowPhase.ACTIVE if self.active else GlowPhase.IDLE


@dataclass(frozen=True)
class ClusterFrame:
    """Everything one engine tick decided."""

    sample: SensorSample
    reading: PhysicalReading
    status: ClassifiedReadings
    flash: FlashPhase
    glow: GlowState
    background: Color
    glow_remaining_s: Optional[int] = None  # Set only while the countdown runs

    @property
    def any_critical(self) -> bool:
        return self.status.any_critical
