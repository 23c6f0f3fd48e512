"""Qt signal boundary between user actions and the game controller."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from tacto.core.enums import StorageSource
from tacto.errors import TactoError
from tacto.game.interfaces import IGameController

_LOGGER = logging.getLogger(__name__)


class UserActionEvents(QObject):
    """Signals raised by whatever surface collects user intent."""

    start_game_clicked = pyqtSignal()
    tile_clicked = pyqtSignal(int, int)  # row, column
    save_state_clicked = pyqtSignal(object)  # StorageSource
    load_state_clicked = pyqtSignal(object)  # StorageSource


class GameSession(QObject):
    """Binds :class:`UserActionEvents` to a controller for one session.

    ``start`` subscribes the controller's handlers and ``stop`` removes
    them.  Errors raised by a handler are logged and re-emitted through
    :attr:`action_failed` instead of reaching the signal source.
    """

    action_failed = pyqtSignal(str)

    __slots__ = ("_controller", "_events", "_rows", "_columns", "_active")

    def __init__(
        self,
        controller: IGameController,
        events: UserActionEvents,
        rows: int,
        columns: int,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._events = events
        self._rows = rows
        self._columns = columns
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        """Initialize the controller and subscribe to user actions.

        Raises ``InvalidBoardSize`` when the configured board is not square;
        nothing is subscribed in that case.
        """
        if self._active:
            return
        self._controller.initialize(self._rows, self._columns)
        self._events.start_game_clicked.connect(self._on_start_game)
        self._events.tile_clicked.connect(self._on_tile_clicked)
        self._events.save_state_clicked.connect(self._on_save_state)
        self._events.load_state_clicked.connect(self._on_load_state)
        self._active = True
        _LOGGER.debug("Game session started")

    def stop(self) -> None:
        """Unsubscribe from user actions and release the controller state."""
        if not self._active:
            return
        self._events.start_game_clicked.disconnect(self._on_start_game)
        self._events.tile_clicked.disconnect(self._on_tile_clicked)
        self._events.save_state_clicked.disconnect(self._on_save_state)
        self._events.load_state_clicked.disconnect(self._on_load_state)
        self._controller.deinitialize()
        self._active = False
        _LOGGER.debug("Game session stopped")

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot()
    def _on_start_game(self) -> None:
        self._controller.on_start_game()

    @pyqtSlot(int, int)
    def _on_tile_clicked(self, row: int, col: int) -> None:
        self._controller.on_move_attempt(row, col)

    @pyqtSlot(object)
    def _on_save_state(self, source: StorageSource) -> None:
        try:
            self._controller.on_save_request(source)
        except (TactoError, OSError) as exc:
            self._report(f"Save failed: {exc}")

    @pyqtSlot(object)
    def _on_load_state(self, source: StorageSource) -> None:
        try:
            self._controller.on_load_request(source)
        except (TactoError, OSError) as exc:
            self._report(f"Load failed: {exc}")

    def _report(self, message: str) -> None:
        _LOGGER.warning(message)
        self.action_failed.emit(message)
