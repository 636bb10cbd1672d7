"""Glow-plug preheat countdown."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.cluster_state import GlowState
from cluster_dash.utils.calibration import clamp, map_linear
from cluster_dash.utils.ticks import DEFAULT_TICK_BITS, ticks_diff

IDLE = GlowState()


@dataclass(frozen=True)
class GlowUpdate:
    """Result of advancing the countdown by one poll."""

    state: GlowState
    remaining_s: Optional[int] = None  # Whole seconds left; None when idle
    finished: bool = False  # True only on the poll that ended the countdown


def glow_duration_s(coolant_c: int, settings: ClusterSettings) -> int:
    """
    Preheat time for the given coolant temperature.

    The cold end of the temperature range maps to the longest time, so the
    output range is deliberately reversed (max time first).
    """
    duration = map_linear(
        coolant_c,
        settings.glow_temp_min_c,
        settings.glow_temp_max_c,
        settings.glow_max_s,
        settings.glow_min_s,
    )
    return clamp(duration, settings.glow_min_s, settings.glow_max_s)


def press_glow(
    state: GlowState, coolant_c: int, now_ms: int, settings: ClusterSettings
) -> GlowState:
    """
    Handle a glow button press.

    State machine:
        IDLE ──(press)──> ACTIVE (duration fixed from coolant_c)
        ACTIVE ──(press)──> ACTIVE (ignored)
    """
    if state.active:
        return state
    return GlowState(
        active=True,
        start_ms=now_ms,
        duration_s=glow_duration_s(coolant_c, settings),
    )


def advance_glow(
    state: GlowState, now_ms: int, bits: int = DEFAULT_TICK_BITS
) -> GlowUpdate:
    """
    Advance the countdown.

    State machine:
        ACTIVE ──(elapsed >= duration)──> IDLE (finished)
        ACTIVE ──(elapsed < duration)──> ACTIVE (remaining recomputed)
    """
    if not state.active:
        return GlowUpdate(state)

    elapsed_ms = ticks_diff(now_ms, state.start_ms, bits)
    duration_ms = state.duration_s * 1000
    if elapsed_ms >= duration_ms:
        return GlowUpdate(IDLE, finished=True)

    # elapsed can only be negative if the clock stepped back; show full time
    remaining_ms = duration_ms - max(0, elapsed_ms)
    return GlowUpdate(state, remaining_s=remaining_ms // 1000)
