"""Display primitives: colors, rectangles and the cluster palette."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Color:
    """
    A composite-style color: a hue plus a brightness level.

    hue is in degrees (0-359) or None for grayscale; level is 0-255.
    """

    hue: Optional[int]
    level: int

    @property
    def is_dark(self) -> bool:
        return self.level < 128


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int


# Logical screen (PAL composite, 128x96)
SCREEN_W = 128
SCREEN_H = 96
SCREEN_RECT = Rect(0, 0, SCREEN_W, SCREEN_H)
FONT_PX = 8  # Glyph height at text scale 1

# Hues (degrees)
HUE_RED = 0
HUE_AMBER = 40
HUE_GREEN = 120
HUE_BLUE = 210

# Palette
BLACK = Color(None, 0)
WHITE = Color(None, 255)
GAUGE_TRACK = Color(None, 60)
NORMAL_BACKGROUND = BLACK
ALERT_BACKGROUND = Color(HUE_RED, 200)
STATUS_OK = Color(HUE_GREEN, 220)
STATUS_CRITICAL = Color(HUE_RED, 230)
COOLANT_COLD = Color(HUE_BLUE, 220)
GLOW_AMBER = Color(HUE_AMBER, 255)
