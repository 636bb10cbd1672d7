"""Sensor inputs and actuator outputs."""

from __future__ import annotations

import logging
import random
from typing import Dict, Protocol

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.readings import SensorSample

logger = logging.getLogger(__name__)


class InputProvider(Protocol):
    """Pin reads. Analog values are raw ADC counts."""

    def read_digital(self, channel: int) -> bool: ...

    def read_analog(self, channel: int) -> int: ...


class ActuatorOutput(Protocol):
    def write_digital(self, channel: int, value: bool) -> None: ...


def read_sample(inputs: InputProvider, settings: ClusterSettings) -> SensorSample:
    """Read all channels for one frame."""
    return SensorSample(
        oil_switch=inputs.read_digital(settings.oil_channel),
        coolant_raw=inputs.read_analog(settings.coolant_channel),
        fuel_raw=inputs.read_analog(settings.fuel_channel),
        glow_button=inputs.read_digital(settings.glow_button_channel),
    )


class MockSensorInput:
    """
    Simulated senders for bench use without a car attached.

    Coolant warms up from cold towards a working temperature and fuel drains
    slowly; the oil switch occasionally reports low pressure. The glow button
    is driven from the UI via set_button().
    """

    ADC_MAX = 4095  # 12-bit converter

    def __init__(self, settings: ClusterSettings, seed: int | None = None):
        self._settings = settings
        self._rng = random.Random(seed)

        self._coolant_raw = float(settings.coolant_adc_min)
        self._fuel_raw = float(settings.fuel_adc_max)
        self._oil_low = False
        self._button = False

    def set_button(self, pressed: bool) -> None:
        self._button = pressed

    def read_digital(self, channel: int) -> bool:
        s = self._settings
        if channel == s.oil_channel:
            return self._oil_low == s.oil_critical_level
        if channel == s.glow_button_channel:
            return self._button
        return False

    def read_analog(self, channel: int) -> int:
        s = self._settings
        if channel == s.coolant_channel:
            return int(self._coolant_raw)
        if channel == s.fuel_channel:
            return int(self._fuel_raw)
        return 0

    def mock_tick(self) -> None:
        """
        Move the simulated senders one step.

        Call this from MainWindow's mock timer.
        """
        s = self._settings

        # Warm up towards ~105 °C worth of counts, with a little noise
        target = s.coolant_adc_max * 0.95
        self._coolant_raw += (target - self._coolant_raw) * 0.02 + self._rng.uniform(-4, 4)
        self._coolant_raw = max(0.0, min(self.ADC_MAX, self._coolant_raw))

        # Drain; refill once it runs dry
        self._fuel_raw -= self._rng.uniform(0, 6)
        if self._fuel_raw < s.fuel_adc_min - 20:
            logger.info("Mock fuel tank refilled")
            self._fuel_raw = float(s.fuel_adc_max)

        # Occasionally toggle a low-oil-pressure blip
        if self._rng.random() < 0.02:
            self._oil_low = not self._oil_low


class ConsoleActuator:
    """Output pins that only exist in the log (desktop builds)."""

    def __init__(self):
        self.levels: Dict[int, bool] = {}

    def write_digital(self, channel: int, value: bool) -> None:
        if self.levels.get(channel) != value:
            logger.info("Output %d -> %s", channel, "HIGH" if value else "LOW")
        self.levels[channel] = value
