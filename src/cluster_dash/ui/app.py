from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QRect, Qt, QTimer
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.cluster_state import ClusterFrame
from cluster_dash.services.engine import ClusterEngine
from cluster_dash.services.io_ports import ConsoleActuator, MockSensorInput
from cluster_dash.ui.surface import QImageSurface
from cluster_dash.utils.ticks import MonotonicClock

logger = logging.getLogger(__name__)

MOCK_INTERVAL_MS = 200  # simulated sender drift


# ----------------------------
# Small widgets
# ----------------------------


class ClusterView(QWidget):
    """
    Shows the composite framebuffer, scaled up by a whole-pixel factor.
    """

    def __init__(self, surface: QImageSurface, scale: int = 5):
        super().__init__()
        self._surface = surface
        self._scale = scale
        img = surface.image
        self.setFixedSize(img.width() * scale, img.height() * scale)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

    def paintEvent(self, event):
        p = QPainter(self)
        # Keep the chunky composite pixels
        p.setRenderHint(QPainter.SmoothPixmapTransform, False)
        p.fillRect(self.rect(), QColor(0, 0, 0))
        img = self._surface.image
        p.drawImage(QRect(0, 0, img.width() * self._scale, img.height() * self._scale), img)


# ----------------------------
# Main Window
# ----------------------------


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[ClusterSettings] = None, scale: int = 5):
        super().__init__()
        self.setWindowTitle("Cluster Dash")

        self.settings = settings or ClusterSettings()

        self.surface = QImageSurface()
        self.inputs = MockSensorInput(self.settings)
        self.actuator = ConsoleActuator()
        self.engine = ClusterEngine(
            self.settings,
            self.inputs,
            self.surface,
            self.actuator,
            MonotonicClock(self.settings.tick_bits),
        )

        root = QWidget()
        self.setCentralWidget(root)
        main = QVBoxLayout(root)
        main.setContentsMargins(12, 12, 12, 12)
        main.setSpacing(10)

        self.view = ClusterView(self.surface, scale=scale)
        main.addWidget(self.view, 0, Qt.AlignCenter)

        bottom = QHBoxLayout()
        bottom.setSpacing(12)

        self.status_lbl = QLabel("--")
        self.status_lbl.setObjectName("statusLine")
        bottom.addWidget(self.status_lbl, 1)

        self.glow_btn = QPushButton("GLOW")
        self.glow_btn.setObjectName("glowBtn")
        self.glow_btn.setFixedHeight(44)
        self.glow_btn.pressed.connect(lambda: self.inputs.set_button(True))
        self.glow_btn.released.connect(lambda: self.inputs.set_button(False))
        bottom.addWidget(self.glow_btn)

        main.addLayout(bottom)

        self._apply_styles()

        # Timers
        self.frame_timer = QTimer(self)
        self.frame_timer.timeout.connect(self._frame_tick)
        self.frame_timer.start(self.settings.frame_interval_ms)

        self.mock_timer = QTimer(self)
        self.mock_timer.timeout.connect(self.inputs.mock_tick)
        self.mock_timer.start(MOCK_INTERVAL_MS)

    def closeEvent(self, event):
        """Stop ticking and release the glow output."""
        self.frame_timer.stop()
        self.mock_timer.stop()
        self.engine.shutdown()
        super().closeEvent(event)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_G and not event.isAutoRepeat():
            self.inputs.set_button(True)
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key_G and not event.isAutoRepeat():
            self.inputs.set_button(False)
            return
        super().keyReleaseEvent(event)

    def _apply_styles(self):
        self.setStyleSheet(
            """
            QMainWindow { background-color: rgb(12, 12, 12); }
            QLabel#statusLine {
                color: rgba(245, 235, 215, 230);
                font-size: 14px;
            }
            QPushButton#glowBtn {
                background-color: rgba(160, 90, 20, 235);
                color: rgb(255, 235, 200);
                font-size: 16px;
                font-weight: bold;
                border-radius: 8px;
                padding: 0 24px;
            }
            QPushButton#glowBtn:pressed { background-color: rgba(220, 130, 30, 250); }
            """
        )

    # ---------- Updates ----------

    def _frame_tick(self):
        frame = self.engine.tick()
        self.status_lbl.setText(self._status_text(frame))
        self.view.update()

    @staticmethod
    def _status_text(frame: ClusterFrame) -> str:
        if frame.glow_remaining_s is not None:
            return f"PREHEAT {frame.glow_remaining_s}s"
        st = frame.status
        parts = [
            f"OIL {st.oil.value.upper()}",
            f"COOLANT {frame.reading.coolant_c}C {st.coolant.severity.value.upper()}",
            f"FUEL {frame.reading.fuel_liters}L {st.fuel.severity.value.upper()}",
        ]
        return "   ".join(parts)
