"""BoardWindow: N×N button grid implementing the game view."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSlot
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from tacto.core.enums import Player, StorageSource
from tacto.core.types import GridSize
from tacto.game.bridge import UserActionEvents

_MARK_TEXT: dict[Player, str] = {Player.A: "X", Player.B: "O"}
_SOURCE_LABELS: dict[StorageSource, str] = {
    StorageSource.DURABLE: "Durable",
    StorageSource.VOLATILE: "In memory",
}


class BoardWindow(QWidget):
    """Top-level game window.

    Renders what the controller tells it to and forwards clicks through
    *events*.  Holds no game rules of its own.
    """

    def __init__(
        self,
        grid_size: GridSize,
        events: UserActionEvents,
        *,
        default_source: StorageSource = StorageSource.DURABLE,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._grid_size = grid_size
        self._events = events
        self._tiles: list[QPushButton] = []
        self.setWindowTitle("tacto")
        self._setup_ui(default_source)
        self._set_board_enabled(False)
        self._status.setText("Press New Game to start")

    def _setup_ui(self, default_source: StorageSource) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self._status = QLabel()
        self._status.setFont(QFont("Adwaita Sans", 12))
        layout.addWidget(self._status)

        grid = QGridLayout()
        grid.setSpacing(4)
        tile_font = QFont("Adwaita Sans", 20)
        for index in range(self._grid_size.length):
            row, col = self._grid_size.to_row_col(index)
            tile = QPushButton()
            tile.setFont(tile_font)
            tile.setMinimumSize(64, 64)
            tile.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            tile.clicked.connect(
                lambda _checked=False, r=row, c=col: self._events.tile_clicked.emit(r, c)
            )
            grid.addWidget(tile, row, col)
            self._tiles.append(tile)
        layout.addLayout(grid)

        controls = QHBoxLayout()
        self._btn_new = QPushButton("New Game")
        self._btn_new.clicked.connect(self._events.start_game_clicked)
        controls.addWidget(self._btn_new)

        self._source_combo = QComboBox()
        for source, label in _SOURCE_LABELS.items():
            self._source_combo.addItem(label, source.value)
        self._source_combo.setCurrentIndex(self._source_combo.findData(default_source.value))
        controls.addWidget(self._source_combo)

        self._btn_save = QPushButton("Save")
        self._btn_save.clicked.connect(
            lambda: self._events.save_state_clicked.emit(self.selected_source)
        )
        controls.addWidget(self._btn_save)

        self._btn_load = QPushButton("Load")
        self._btn_load.clicked.connect(
            lambda: self._events.load_state_clicked.emit(self.selected_source)
        )
        controls.addWidget(self._btn_load)
        layout.addLayout(controls)

    # ── Accessors (used by tests) ────────────────────────────────────────

    @property
    def selected_source(self) -> StorageSource:
        return StorageSource(self._source_combo.currentData())

    def set_selected_source(self, source: StorageSource) -> None:
        self._source_combo.setCurrentIndex(self._source_combo.findData(source.value))

    def tile_button(self, row: int, col: int) -> QPushButton:
        return self._tiles[self._grid_size.to_index(row, col)]

    def tile_text(self, row: int, col: int) -> str:
        return self.tile_button(row, col).text()

    @property
    def status_text(self) -> str:
        return self._status.text()

    @property
    def new_game_button(self) -> QPushButton:
        return self._btn_new

    @property
    def save_button(self) -> QPushButton:
        return self._btn_save

    @property
    def load_button(self) -> QPushButton:
        return self._btn_load

    # ── IGameView ────────────────────────────────────────────────────────

    def start_game(self, current_player: Player) -> None:
        for tile in self._tiles:
            tile.setText("")
        self._set_board_enabled(True)
        self._status.setText(f"{_MARK_TEXT[current_player]} to move")

    def set_tile_mark(self, player: Player, row: int, col: int) -> None:
        self.tile_button(row, col).setText(_MARK_TEXT[player])

    def change_turn(self, next_player: Player) -> None:
        self._status.setText(f"{_MARK_TEXT[next_player]} to move")

    def game_won(self, winner: Player) -> None:
        self._set_board_enabled(False)
        self._status.setText(f"{_MARK_TEXT[winner]} wins!")

    def game_tie(self) -> None:
        self._set_board_enabled(False)
        self._status.setText("It's a tie")

    @pyqtSlot(str)
    def show_error(self, message: str) -> None:
        self._status.setText(message)

    def _set_board_enabled(self, enabled: bool) -> None:
        for tile in self._tiles:
            tile.setEnabled(enabled)
