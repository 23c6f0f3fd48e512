"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tacto.config import GameSettings
from tacto.errors import InvalidBoardSize

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from tacto.game.bridge import GameSession
    from tacto.ui.board_window import BoardWindow

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("tacto")
    app.setOrganizationName("tacto")
    app.setStyle("Fusion")


def build_session(settings: GameSettings) -> tuple[BoardWindow, GameSession]:
    """Wire window, controller and event boundary for one session.

    Raises :class:`InvalidBoardSize` before any widget is created when the
    configured board is not square.
    """
    from tacto.game.bridge import GameSession, UserActionEvents
    from tacto.game.controller import GameController
    from tacto.ui.board_window import BoardWindow

    grid_size = settings.grid_size
    events = UserActionEvents()
    window = BoardWindow(grid_size, events, default_source=settings.default_source)
    controller = GameController(window, settings)
    session = GameSession(controller, events, settings.rows, settings.columns)
    session.action_failed.connect(window.show_error)
    session.start()
    return window, session


def run_application(settings: GameSettings, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    try:
        window, session = build_session(settings)
    except InvalidBoardSize as exc:
        _LOGGER.error("Cannot start game: %s", exc)
        return 2
    app.aboutToQuit.connect(session.stop)
    window.show()

    return app.exec()
