import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from cluster_dash.config.settings import ClusterSettings, ConfigurationError
from cluster_dash.ui.app import MainWindow

logger = logging.getLogger("cluster_dash")


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--fullscreen", action="store_true", help="Run fullscreen (in-vehicle)")
    p.add_argument("--config", type=Path, default=None, help="Calibration JSON file")
    p.add_argument("--scale", type=int, default=5, help="Pixel scale factor for the display")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return p.parse_args(argv)


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # A bad calibration must stop us before anything is drawn
    try:
        settings = ClusterSettings.load(args.config)
    except ConfigurationError as e:
        logger.error("Invalid calibration: %s", e)
        return 2

    app = QApplication(sys.argv)
    w = MainWindow(settings=settings, scale=max(1, args.scale))
    if args.fullscreen:
        w.showFullScreen()
    else:
        w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
