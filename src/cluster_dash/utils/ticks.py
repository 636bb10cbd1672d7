"""Wrapping millisecond tick counter helpers."""

from __future__ import annotations

import time

DEFAULT_TICK_BITS = 32  # same width as an Arduino millis() counter


def ticks_diff(new: int, old: int, bits: int = DEFAULT_TICK_BITS) -> int:
    """
    Signed difference new - old on a counter that wraps every 2**bits ticks.

    Correct as long as the true interval is shorter than half the period.
    """
    period = 1 << bits
    half = period >> 1
    return ((new - old + half) % period) - half


class MonotonicClock:
    """Millisecond ticks from time.monotonic(), wrapped to the given width."""

    def __init__(self, bits: int = DEFAULT_TICK_BITS):
        self.bits = bits
        self._mask = (1 << bits) - 1

    def ticks_ms(self) -> int:
        return int(time.monotonic() * 1000) & self._mask
