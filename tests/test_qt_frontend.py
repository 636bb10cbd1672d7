"""
Tests for the PySide6 surface and main window
"""
import pytest

pytest.importorskip("PySide6")

from PySide6.QtGui import QColor

from cluster_dash.config.settings import ClusterSettings
from cluster_dash.models.display import BLACK, WHITE, Color, Rect
from cluster_dash.ui.icons import OIL_ICON
from cluster_dash.ui.surface import QImageSurface, to_qcolor


class TestColorConversion:
    """Test hue/level to RGB"""

    def test_grayscale(self) -> None:
        """Test colors without a hue"""
        assert to_qcolor(WHITE) == QColor(255, 255, 255)
        assert to_qcolor(BLACK) == QColor(0, 0, 0)

    def test_red_hue(self) -> None:
        """Test a saturated hue"""
        c = to_qcolor(Color(0, 200))
        assert (c.red(), c.green(), c.blue()) == (200, 0, 0)


class TestQImageSurface:
    """Test drawing into the framebuffer"""

    def test_fill_region(self, qt_app) -> None:
        """Test a filled rectangle"""
        surface = QImageSurface()
        surface.fill_region(Rect(0, 0, 10, 10), WHITE)
        assert surface.image.pixelColor(5, 5) == QColor(255, 255, 255)
        assert surface.image.pixelColor(20, 20) == QColor(0, 0, 0)

    def test_draw_bitmap(self, qt_app) -> None:
        """Test that set bits are drawn and clear bits left alone"""
        surface = QImageSurface()
        surface.draw_bitmap(0, 0, OIL_ICON, 8, 8, WHITE)
        # First row is 0b00011000
        assert surface.image.pixelColor(3, 0) == QColor(255, 255, 255)
        assert surface.image.pixelColor(0, 0) == QColor(0, 0, 0)

    def test_bitmap_clipped_at_edge(self, qt_app) -> None:
        """Test drawing partly off screen"""
        surface = QImageSurface()
        surface.draw_bitmap(124, 92, OIL_ICON, 8, 8, WHITE)
        # Column 3 of the first row lands on the last on-screen pixel
        assert surface.image.pixelColor(127, 92) == QColor(255, 255, 255)


class TestMainWindow:
    """Smoke test for the window"""

    def test_frame_tick_and_glow_button(self, qt_app) -> None:
        """Test a gauge frame, then a preheat frame after pressing GLOW"""
        from cluster_dash.ui.app import MainWindow

        window = MainWindow(settings=ClusterSettings(), scale=1)
        try:
            window._frame_tick()
            assert window.status_lbl.text().startswith("OIL")

            window.glow_btn.pressed.emit()
            window._frame_tick()
            assert window.status_lbl.text() == "PREHEAT 8s"
            assert window.actuator.levels[window.settings.glow_output_channel] is True
        finally:
            window.frame_timer.stop()
            window.mock_timer.stop()
            window.engine.shutdown()

        assert window.actuator.levels[window.settings.glow_output_channel] is False
