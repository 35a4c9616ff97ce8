"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from clichess.game.config import GameConfig

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("CLI Chess")
    app.setStyle("Fusion")


def run_application(config: GameConfig | None = None, argv: list[str] | None = None) -> int:
    """Create and run the Qt application."""
    from PyQt6.QtWidgets import QApplication

    from clichess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    config = config if config is not None else GameConfig()
    window = MainWindow(config)
    window.show()
    _LOGGER.info("Window shown; human plays %s", config.human_color)

    return app.exec()


def main() -> None:
    """Launch the Qt board with default settings."""
    sys.exit(run_application())
