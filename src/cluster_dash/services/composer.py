"""Frame composition: decides what is drawn, where, and in which color."""

from __future__ import annotations

from typing import Optional, Protocol

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.cluster_state import FlashPhase
from cluster_dash.models.display import (
    ALERT_BACKGROUND,
    BLACK,
    GAUGE_TRACK,
    GLOW_AMBER,
    NORMAL_BACKGROUND,
    SCREEN_RECT,
    STATUS_CRITICAL,
    STATUS_OK,
    WHITE,
    Color,
    Rect,
)
from cluster_dash.models.readings import ChannelStatus, ClassifiedReadings, PhysicalReading
from cluster_dash.ui.icons import (
    DEGREE_H,
    DEGREE_MARK,
    DEGREE_W,
    FUEL_ICON,
    GLOW_ICON,
    ICON_H,
    ICON_W,
    OIL_ICON,
    TEMP_ICON,
)
from cluster_dash.utils.calibration import map_linear

# Row layout (logical pixels)
OIL_Y = 10
COOLANT_Y = 30
FUEL_Y = 50
ICON_X = 0
LABEL_X = 15
GAUGE_X = 20
GAUGE_W = 42
GAUGE_H = 10
BAR_MAX_W = GAUGE_W - 2
READOUT_X = 70
DEGREE_X = READOUT_X + 15
UNIT_X = READOUT_X + 20

# Glow countdown screen
GLOW_ICON_X = 12
GLOW_ICON_Y = 36
GLOW_DIGITS_X = 44
GLOW_DIGITS_Y = 18
GLOW_DIGITS_SCALE = 5
GLOW_CAPTION_X = 48
GLOW_CAPTION_Y = 70


class RenderSurface(Protocol):
    """
    Minimal pixel surface.

    Calls are applied in order; later draws cover earlier ones.
    """

    def fill_region(self, rect: Rect, color: Color) -> None: ...

    def draw_bitmap(self, x: int, y: int, bitmap: bytes, w: int, h: int, color: Color) -> None: ...

    def draw_text(self, x: int, y: int, text: str, color: Color, scale: int = 1) -> None: ...


def background_color(any_critical: bool, flash: FlashPhase) -> Color:
    if any_critical and flash.on:
        return ALERT_BACKGROUND
    return NORMAL_BACKGROUND


def contrast_color(background: Color) -> Color:
    """Foreground that stays readable on the given background."""
    return WHITE if background.is_dark else BLACK


def status_text_color(preferred: Color, background: Color) -> Color:
    """
    Colored status text, unless the background is lit.

    On the lit alert background a red label would vanish into the fill, so
    text falls back to the contrast color.
    """
    if background.is_dark:
        return preferred
    return contrast_color(background)


class DisplayComposer:
    """Issues the draw calls for one frame."""

    def __init__(self, settings: ClusterSettings):
        self._settings = settings

    def render(
        self,
        surface: RenderSurface,
        reading: PhysicalReading,
        status: ClassifiedReadings,
        flash: FlashPhase,
    ) -> Color:
        """
        Draw the gauge screen.

        Order: background, then per row icon -> gauge -> text.

        Returns:
            The background color used for this frame
        """
        s = self._settings
        bg = background_color(status.any_critical, flash)
        fg = contrast_color(bg)

        surface.fill_region(SCREEN_RECT, bg)

        if self._row_visible(status.oil_critical, flash):
            surface.draw_bitmap(ICON_X, OIL_Y, OIL_ICON, ICON_W, ICON_H, fg)
            if status.oil_critical:
                surface.draw_text(LABEL_X, OIL_Y, "OIL WARN", status_text_color(STATUS_CRITICAL, bg))
            else:
                surface.draw_text(LABEL_X, OIL_Y, "OIL OK", status_text_color(STATUS_OK, bg))

        if self._row_visible(status.coolant.critical, flash):
            self._draw_gauge_row(
                surface,
                COOLANT_Y,
                TEMP_ICON,
                reading.coolant_c,
                s.coolant_c_min,
                s.coolant_c_max,
                status.coolant,
                str(reading.coolant_c),
                fg,
                degree_unit="C",
            )

        if self._row_visible(status.fuel.critical, flash):
            self._draw_gauge_row(
                surface,
                FUEL_Y,
                FUEL_ICON,
                reading.fuel_liters,
                s.fuel_liters_min,
                s.fuel_liters_max,
                status.fuel,
                f"{reading.fuel_liters}L",
                fg,
            )

        return bg

    def render_glow(self, surface: RenderSurface, remaining_s: int) -> Color:
        """Draw the full-screen preheat countdown (and nothing else)."""
        bg = NORMAL_BACKGROUND
        surface.fill_region(SCREEN_RECT, bg)
        surface.draw_bitmap(GLOW_ICON_X, GLOW_ICON_Y, GLOW_ICON, ICON_W, ICON_H, GLOW_AMBER)
        surface.draw_text(GLOW_DIGITS_X, GLOW_DIGITS_Y, str(max(0, remaining_s)), GLOW_AMBER, GLOW_DIGITS_SCALE)
        surface.draw_text(GLOW_CAPTION_X, GLOW_CAPTION_Y, "GLOW", contrast_color(bg))
        return bg

    def _row_visible(self, critical: bool, flash: FlashPhase) -> bool:
        """Critical rows blink with the flash phase when enabled."""
        return not (self._settings.blink_critical_channels and critical and not flash.on)

    @staticmethod
    def bar_width(value: int, vmin: int, vmax: int) -> int:
        return map_linear(value, vmin, vmax, 0, BAR_MAX_W)

    def _draw_gauge_row(
        self,
        surface: RenderSurface,
        y: int,
        icon: bytes,
        value: int,
        vmin: int,
        vmax: int,
        channel: ChannelStatus,
        readout: str,
        fg: Color,
        degree_unit: Optional[str] = None,
    ) -> None:
        surface.draw_bitmap(ICON_X, y, icon, ICON_W, ICON_H, fg)

        surface.fill_region(Rect(GAUGE_X, y, GAUGE_W, GAUGE_H), GAUGE_TRACK)
        width = self.bar_width(value, vmin, vmax)
        if width > 0:
            surface.fill_region(Rect(GAUGE_X + 1, y + 1, width, GAUGE_H - 2), channel.color)

        surface.draw_text(READOUT_X, y, readout, fg)
        if degree_unit is not None:
            surface.draw_bitmap(DEGREE_X, y, DEGREE_MARK, DEGREE_W, DEGREE_H, fg)
            surface.draw_text(UNIT_X, y, degree_unit, fg)
