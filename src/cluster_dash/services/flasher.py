"""Free-running blink oscillator."""

from __future__ import annotations

from cluster_dash.models.cluster_state import FlashPhase
from cluster_dash.utils.ticks import DEFAULT_TICK_BITS, ticks_diff


def advance_flash(
    phase: FlashPhase, now_ms: int, interval_ms: int, bits: int = DEFAULT_TICK_BITS
) -> FlashPhase:
    """
    Poll the oscillator.

    Flips the phase once more than interval_ms has passed since the last
    toggle. Polling again before that returns the same phase, so the blink
    rate follows the clock rather than the frame rate.
    """
    if ticks_diff(now_ms, phase.last_toggle_ms, bits) > interval_ms:
        return FlashPhase(on=not phase.on, last_toggle_ms=now_ms)
    return phase
