"""GameController: the state machine behind a grid game session.

Coordinates: BoardState, Rules, the active storage backend and the view.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tacto.config import GameSettings
from tacto.core.board import BoardState
from tacto.core.enums import GamePhase, Player, StorageSource
from tacto.core.rules import Rules
from tacto.core.types import GridSize, TileIndex, TilePosition
from tacto.errors import CorruptState, NoSavedState, UnknownStorageSource
from tacto.game.interfaces import IGameController, IGameView
from tacto.storage import BoardStorage, KeyValueStore, create_storage

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

PhaseCallback = Callable[[GamePhase], None]
MoveCallback = Callable[[TilePosition, Player], None]
GameOverCallback = Callable[[GamePhase, Player | None], None]  # phase, winner
LoadCallback = Callable[[BoardState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_state_loaded: list[LoadCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a game: validates moves, detects wins and ties, switches
    turns, saves and loads, and drives the view.

    Thread-safety: every handler is meant to be called from a single thread
    and runs to completion before the next one.
    """

    __slots__ = (
        "_view",
        "_settings",
        "_store",
        "_grid",
        "_board",
        "_phase",
        "_winning_line",
        "_source",
        "_storage",
        "events",
    )

    def __init__(
        self,
        view: IGameView,
        settings: GameSettings | None = None,
        *,
        store: KeyValueStore | None = None,
    ) -> None:
        self._view = view
        self._settings = settings if settings is not None else GameSettings()
        self._store = store
        self._grid: GridSize | None = None
        self._board: BoardState | None = None
        self._phase = GamePhase.AWAITING_START
        self._winning_line: tuple[TileIndex, ...] | None = None
        self._source: StorageSource | None = None
        self._storage: BoardStorage | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def is_initialized(self) -> bool:
        return self._grid is not None

    @property
    def grid_size(self) -> GridSize:
        return self._require_grid()

    @property
    def board(self) -> BoardState:
        """Copy of the live board; only the controller mutates the live one."""
        return self._require_board().copy()

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def current_player(self) -> Player:
        return self._require_board().current_player

    @property
    def storage_source(self) -> StorageSource | None:
        return self._source

    @property
    def storage(self) -> BoardStorage | None:
        return self._storage

    @property
    def winning_line(self) -> list[TilePosition] | None:
        """Positions of the completed line once the game is won."""
        if self._winning_line is None or self._grid is None:
            return None
        return [self._grid.to_row_col(index) for index in self._winning_line]

    # ── Session lifecycle ────────────────────────────────────────────────

    def initialize(self, rows: int, columns: int) -> None:
        self._grid = GridSize(rows, columns)
        self._board = BoardState.empty(self._grid.length)
        self._phase = GamePhase.AWAITING_START
        self._winning_line = None
        self._source = None
        self._storage = None
        self._use_storage(self._settings.default_source)
        _LOGGER.debug("Initialized %s board", self._grid)

    def deinitialize(self) -> None:
        if self._grid is not None:
            self._board = BoardState.empty(self._grid.length)
        self._storage = None
        self._source = None
        self._winning_line = None
        self._set_phase(GamePhase.AWAITING_START)

    # ── IGameController impl ─────────────────────────────────────────────

    def on_start_game(self) -> None:
        board = self._require_board()
        board.reset()
        self._winning_line = None
        self._set_phase(GamePhase.IN_PROGRESS)
        _LOGGER.info("New %s game, %s to move", self._grid, board.current_player)
        self._view.start_game(board.current_player)

    def on_move_attempt(self, row: int, col: int) -> bool:
        if self._phase != GamePhase.IN_PROGRESS:
            _LOGGER.debug("Ignoring move (%d, %d) in phase %s", row, col, self._phase.name)
            return False

        grid = self._require_grid()
        board = self._require_board()
        if not grid.contains(row, col):
            _LOGGER.debug("Ignoring out-of-range move (%d, %d)", row, col)
            return False
        index = grid.to_index(row, col)
        if not board.is_empty(index):
            _LOGGER.debug("Ignoring move on occupied tile (%d, %d)", row, col)
            return False

        player = board.current_player
        board.place_mark(index, player)
        self._view.set_tile_mark(player, row, col)
        self._emit_move(TilePosition(row, col), player)

        if self._check_for_win() or self._check_for_tie():
            return True

        board.current_player = player.opposite
        self._view.change_turn(board.current_player)
        return True

    def on_save_request(self, source: StorageSource) -> None:
        storage = self._use_storage(source)
        board = self._require_board()
        storage.save(board.cells, board.current_player, board.won, board.tied)
        _LOGGER.info("Saved game to %s storage", storage.source)

    def on_load_request(self, source: StorageSource) -> BoardState:
        storage = self._use_storage(source)
        grid = self._require_grid()

        loaded = storage.load()
        if loaded is None:
            raise NoSavedState(f"There is no state saved in {storage.source} storage")
        if len(loaded) != grid.length:
            raise CorruptState(
                f"The loaded board has {len(loaded)} tiles, expected {grid.length}"
            )

        self._board = loaded
        if loaded.won:
            found = Rules.winning_line(loaded, grid)
            self._winning_line = found[1] if found is not None else None
            phase = GamePhase.WON
        elif loaded.tied:
            self._winning_line = None
            phase = GamePhase.TIED
        else:
            self._winning_line = None
            phase = GamePhase.IN_PROGRESS
        self._set_phase(phase)
        _LOGGER.info("Loaded game from %s storage (%s)", storage.source, phase.name)

        self._render_loaded(loaded)
        for cb in self.events.on_state_loaded:
            cb(loaded.copy())
        return loaded.copy()

    # ── Internal ─────────────────────────────────────────────────────────

    def _require_grid(self) -> GridSize:
        if self._grid is None:
            raise RuntimeError("GameController.initialize() has not been called")
        return self._grid

    def _require_board(self) -> BoardState:
        if self._board is None:
            raise RuntimeError("GameController.initialize() has not been called")
        return self._board

    def _use_storage(self, source: StorageSource) -> BoardStorage:
        """Return the backend for *source*, replacing the active one if needed."""
        try:
            source = StorageSource(source)
        except ValueError:
            raise UnknownStorageSource(f"Invalid storage source: {source!r}") from None

        if self._storage is not None and source == self._source:
            return self._storage

        store = None
        if source == StorageSource.DURABLE:
            if self._store is None:
                self._store = self._settings.create_store()
            store = self._store
        storage = create_storage(source, store=store, key=self._settings.state_key)
        _LOGGER.debug("Switching storage %s -> %s", self._source, source)
        self._source = source
        self._storage = storage
        return storage

    def _check_for_win(self) -> bool:
        board = self._require_board()
        found = Rules.winning_line(board, self._require_grid())
        if found is None:
            return False
        winner, line = found
        board.won = True
        self._winning_line = line
        self._set_phase(GamePhase.WON)
        _LOGGER.info("%s wins", winner)
        self._view.game_won(winner)
        self._emit_game_over(GamePhase.WON, winner)
        return True

    def _check_for_tie(self) -> bool:
        board = self._require_board()
        if not board.is_full():
            return False
        board.tied = True
        self._set_phase(GamePhase.TIED)
        _LOGGER.info("Game tied")
        self._view.game_tie()
        self._emit_game_over(GamePhase.TIED, None)
        return True

    def _render_loaded(self, board: BoardState) -> None:
        grid = self._require_grid()
        self._view.start_game(board.current_player)
        for index, player in board.occupied():
            row, col = grid.to_row_col(index)
            self._view.set_tile_mark(player, row, col)
        if board.won:
            self._view.game_won(board.current_player)
        elif board.tied:
            self._view.game_tie()

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, position: TilePosition, player: Player) -> None:
        for cb in self.events.on_move:
            cb(position, player)

    def _emit_game_over(self, phase: GamePhase, winner: Player | None) -> None:
        for cb in self.events.on_game_over:
            cb(phase, winner)
