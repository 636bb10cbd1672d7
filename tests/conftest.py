"""Shared fakes for the cluster engine tests."""

import os
from typing import Dict, List, Tuple

import pytest

# Qt tests render into QImages only; no display server needed
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.display import Color, Rect


class FakeInputs:
    """Input provider with directly settable pin levels."""

    def __init__(self, settings: ClusterSettings):
        self.settings = settings
        self.digital: Dict[int, bool] = {
            settings.oil_channel: not settings.oil_critical_level,
            settings.glow_button_channel: False,
        }
        self.analog: Dict[int, int] = {
            settings.coolant_channel: 700,
            settings.fuel_channel: 900,
        }

    def read_digital(self, channel: int) -> bool:
        return self.digital.get(channel, False)

    def read_analog(self, channel: int) -> int:
        return self.analog.get(channel, 0)

    def set(self, oil_low: bool = False, coolant_raw: int = 700, fuel_raw: int = 900) -> None:
        s = self.settings
        self.digital[s.oil_channel] = s.oil_critical_level if oil_low else not s.oil_critical_level
        self.analog[s.coolant_channel] = coolant_raw
        self.analog[s.fuel_channel] = fuel_raw

    def set_button(self, pressed: bool) -> None:
        self.digital[self.settings.glow_button_channel] = pressed


class FakeActuator:
    """Records every write."""

    def __init__(self):
        self.writes: List[Tuple[int, bool]] = []

    def write_digital(self, channel: int, value: bool) -> None:
        self.writes.append((channel, value))

    def level(self, channel: int) -> bool:
        for ch, value in reversed(self.writes):
            if ch == channel:
                return value
        return False


class ManualClock:
    def __init__(self, start: int = 0):
        self.now = start

    def ticks_ms(self) -> int:
        return self.now


class RecordingSurface:
    """Keeps the ordered list of draw calls."""

    def __init__(self):
        self.calls: List[tuple] = []

    def fill_region(self, rect: Rect, color: Color) -> None:
        self.calls.append(("fill", rect, color))

    def draw_bitmap(self, x, y, bitmap, w, h, color) -> None:
        self.calls.append(("bitmap", x, y, bitmap, color))

    def draw_text(self, x, y, text, color, scale=1) -> None:
        self.calls.append(("text", x, y, text, color, scale))

    def clear(self) -> None:
        self.calls.clear()

    def texts(self) -> List[str]:
        return [c[3] for c in self.calls if c[0] == "text"]

    def kinds(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def settings() -> ClusterSettings:
    return ClusterSettings()


@pytest.fixture
def inputs(settings) -> FakeInputs:
    return FakeInputs(settings)


@pytest.fixture
def actuator() -> FakeActuator:
    return FakeActuator()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(scope="session")
def qt_app():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
