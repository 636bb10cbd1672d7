"""Calibration constants and thresholds, read once at startup."""

from __future__ import annotations

import json
import logging
import platform
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised for calibration constants that cannot produce a valid reading."""


@dataclass(frozen=True)
class ClusterSettings:
    """
    Cluster calibration with defaults and optional JSON overrides.

    All temperatures are in Celsius, fuel in liters, times in milliseconds
    unless the name says seconds. Values are validated on construction; a
    malformed calibration raises ConfigurationError.
    """

    # Input channels
    oil_channel: int = 2
    coolant_channel: int = 32
    fuel_channel: int = 33
    glow_button_channel: int = 4
    glow_output_channel: int = 26

    # Oil switch level that means "pressure low"
    oil_critical_level: bool = True

    # Coolant sender (ADC counts -> °C)
    coolant_adc_min: int = 100
    coolant_adc_max: int = 900
    coolant_c_min: int = 0
    coolant_c_max: int = 120
    coolant_normal_min_c: int = 70
    coolant_warn_c: int = 90
    coolant_critical_c: int = 100

    # Fuel sender (ADC counts -> liters)
    fuel_adc_min: int = 80
    fuel_adc_max: int = 900
    fuel_liters_min: int = 0
    fuel_liters_max: int = 50
    fuel_reserve_liters: int = 10
    fuel_critical_liters: int = 5

    # Flash / frame timing
    flash_interval_ms: int = 500
    frame_interval_ms: int = 50
    tick_bits: int = 32

    # Glow plug preheat (colder engine -> longer preheat)
    glow_temp_min_c: int = 0
    glow_temp_max_c: int = 70
    glow_min_s: int = 3
    glow_max_s: int = 8

    # Display
    blink_critical_channels: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Reject calibrations that would divide by zero or never tick."""
        # Annotations may be strings (postponed evaluation)
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type in ("bool", bool) and not isinstance(value, bool):
                raise ConfigurationError(f"{f.name} must be true or false (got {value!r})")
            if f.type in ("int", int) and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigurationError(f"{f.name} must be an integer (got {value!r})")

        ranges = {
            "coolant ADC": (self.coolant_adc_min, self.coolant_adc_max),
            "coolant °C": (self.coolant_c_min, self.coolant_c_max),
            "coolant ramp": (self.coolant_normal_min_c, self.coolant_critical_c),
            "fuel ADC": (self.fuel_adc_min, self.fuel_adc_max),
            "fuel liters": (self.fuel_liters_min, self.fuel_liters_max),
            "fuel ramp": (self.fuel_critical_liters, self.fuel_liters_max),
            "glow temperature": (self.glow_temp_min_c, self.glow_temp_max_c),
        }
        for name, (lo, hi) in ranges.items():
            if lo == hi:
                raise ConfigurationError(f"{name} range has equal bounds ({lo})")

        if self.flash_interval_ms <= 0:
            raise ConfigurationError("flash_interval_ms must be positive")
        if self.frame_interval_ms <= 0:
            raise ConfigurationError("frame_interval_ms must be positive")
        if not 8 <= self.tick_bits <= 64:
            raise ConfigurationError("tick_bits must be between 8 and 64")
        if not 0 < self.glow_min_s <= self.glow_max_s:
            raise ConfigurationError(
                f"glow time bounds must satisfy 0 < min <= max "
                f"(got {self.glow_min_s}, {self.glow_max_s})"
            )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> ClusterSettings:
        """
        Load settings from a JSON file.

        Args:
            path: Optional custom path. Uses default if None.

        Returns:
            ClusterSettings instance (defaults if the file doesn't exist or
            can't be parsed)

        Raises:
            ConfigurationError: if the file parses but the calibration is invalid
        """
        if path is None:
            path = cls._default_path()

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read settings from %s: %s", path, e)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", path)
            return cls()

        # Filter to only known fields (ignore obsolete settings)
        known_fields = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known_fields)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        filtered = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered)

    @staticmethod
    def _default_path() -> Path:
        """Get default settings file location."""
        if platform.system() == "Windows":
            base = Path.home() / ".cluster_dash"
        else:
            base = Path.home() / ".local" / "share" / "cluster_dash"
        return base / "settings.json"
