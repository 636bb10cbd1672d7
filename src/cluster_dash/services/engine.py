"""Per-frame pipeline: read, calibrate, classify, oscillate, preheat, draw."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.cluster_state import ClusterFrame, FlashPhase, GlowState
from cluster_dash.services.classifier import classify
from cluster_dash.services.composer import DisplayComposer, RenderSurface
from cluster_dash.services.flasher import advance_flash
from cluster_dash.services.glow_manager import advance_glow, press_glow
from cluster_dash.services.io_ports import ActuatorOutput, InputProvider, read_sample
from cluster_dash.utils.calibration import calibrate
from cluster_dash.utils.ticks import MonotonicClock

logger = logging.getLogger(__name__)


class TickSource(Protocol):
    def ticks_ms(self) -> int: ...


class ClusterEngine:
    """
    Owns the flash and glow state and runs one frame per tick().

    Everything outside the engine (pins, pixels, the glow output) is reached
    through the collaborators passed in; the engine itself never blocks, the
    caller is responsible for frame cadence.
    """

    def __init__(
        self,
        settings: ClusterSettings,
        inputs: InputProvider,
        surface: RenderSurface,
        actuator: ActuatorOutput,
        clock: Optional[TickSource] = None,
    ):
        settings.validate()
        self._settings = settings
        self._inputs = inputs
        self._surface = surface
        self._actuator = actuator
        self._clock = clock or MonotonicClock(settings.tick_bits)
        self._composer = DisplayComposer(settings)

        self._flash = FlashPhase(on=True, last_toggle_ms=self._clock.ticks_ms())
        self._glow = GlowState()
        self._button_was_down = False
        self._was_critical = False

        # Glow plugs start off regardless of what the pin did at boot
        self._actuator.write_digital(settings.glow_output_channel, False)

    @property
    def flash(self) -> FlashPhase:
        return self._flash

    @property
    def glow(self) -> GlowState:
        return self._glow

    @property
    def glow_active(self) -> bool:
        return self._glow.active

    def tick(self, now_ms: Optional[int] = None) -> ClusterFrame:
        """Run one frame and return what was decided."""
        s = self._settings
        if now_ms is None:
            now_ms = self._clock.ticks_ms()

        sample = read_sample(self._inputs, s)
        reading = calibrate(sample, s)
        status = classify(sample, reading, s)
        self._flash = advance_flash(self._flash, now_ms, s.flash_interval_ms, s.tick_bits)

        if status.any_critical != self._was_critical:
            if status.any_critical:
                logger.warning(
                    "Critical: oil=%s coolant=%dC fuel=%dL",
                    status.oil.value,
                    reading.coolant_c,
                    reading.fuel_liters,
                )
            else:
                logger.info("All channels back to normal")
            self._was_critical = status.any_critical

        # Edge-triggered: holding the button does not restart a finished countdown
        pressed = sample.glow_button and not self._button_was_down
        self._button_was_down = sample.glow_button
        if pressed:
            self._start_glow(reading.coolant_c, now_ms)

        update = advance_glow(self._glow, now_ms, s.tick_bits)
        self._glow = update.state
        if update.finished:
            self._actuator.write_digital(s.glow_output_channel, False)
            logger.info("Glow preheat finished")

        if update.remaining_s is not None:
            background = self._composer.render_glow(self._surface, update.remaining_s)
        else:
            background = self._composer.render(self._surface, reading, status, self._flash)

        return ClusterFrame(
            sample=sample,
            reading=reading,
            status=status,
            flash=self._flash,
            glow=self._glow,
            background=background,
            glow_remaining_s=update.remaining_s,
        )

    def _start_glow(self, coolant_c: int, now_ms: int) -> None:
        if self._glow.active:
            return
        self._glow = press_glow(self._glow, coolant_c, now_ms, self._settings)
        self._actuator.write_digital(self._settings.glow_output_channel, True)
        logger.info(
            "Glow preheat started: %ds at %dC", self._glow.duration_s, coolant_c
        )

    def shutdown(self) -> None:
        """Release the glow output if the cluster stops mid-countdown."""
        if self._glow.active:
            logger.info("Shutdown during preheat; glow output released")
            self._glow = GlowState()
        self._actuator.write_digital(self._settings.glow_output_channel, False)
