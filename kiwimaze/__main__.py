"""Main entry point for Kiwi Maze Escape."""

import argparse
import os
import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from .domain.types import GameConfig
from .utils.log import configure_logging, get_logger
from .utils.rng import default_rng, set_global_seed

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Guide the kiwi through a generated maze")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible mazes")
    parser.add_argument("--size", type=int, default=12, help="Grid size (cells per side)")
    parser.add_argument("--log-level", type=str.upper, default="WARNING", choices=LOG_LEVELS,
                        help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger = get_logger(__name__)

    config = GameConfig(grid_size=args.size, seed=args.seed)
    try:
        config.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2

    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    # Set high DPI policy before creating QApplication to disable scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.Floor)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Kiwi Maze Escape")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .ui.main_window import MainWindow
    from .app.controller import GameController

    try:
        set_global_seed(args.seed)
        controller = GameController(config, default_rng)
        window = MainWindow(controller)
        logger.info("Starting %dx%d game (seed=%s)", config.grid_size, config.grid_size, args.seed)

        window.show()
        return app.exec()

    except Exception as e:
        print(f"Application error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
