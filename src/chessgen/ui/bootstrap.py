"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chessgen.settings import DemoSettings

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("chessgen")
    app.setStyle("Fusion")


def run_application(settings: DemoSettings, argv: list[str] | None = None) -> int:
    """Create the viewer window, start the demo and run the Qt event loop."""
    from PyQt6.QtWidgets import QApplication

    from chessgen.ui.demo_window import DemoWindow

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = DemoWindow(settings)
    window.show()
    window.start()
    _LOGGER.info(
        "Viewer started (%d plies, %d ms per ply)",
        settings.plies,
        settings.step_interval_ms,
    )

    return app.exec()
