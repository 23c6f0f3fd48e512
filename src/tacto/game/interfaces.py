"""Abstract interfaces for the game layer.

The controller depends on :class:`IGameView`, not on any concrete widget,
and the event boundary depends on :class:`IGameController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

from tacto.core.enums import Player, StorageSource

if TYPE_CHECKING:
    from tacto.core.board import BoardState


# ── View collaborator ───────────────────────────────────────────────────────


class IGameView(Protocol):
    """Rendering surface driven by the controller."""

    def start_game(self, current_player: Player) -> None:
        """Clear the board and announce the first player."""

    def set_tile_mark(self, player: Player, row: int, col: int) -> None: ...

    def change_turn(self, next_player: Player) -> None: ...

    def game_won(self, winner: Player) -> None: ...

    def game_tie(self) -> None: ...


# ── Controller ──────────────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def initialize(self, rows: int, columns: int) -> None:
        """Set up the board once per session."""

    @abstractmethod
    def deinitialize(self) -> None:
        """Release the board and the active backend."""

    @abstractmethod
    def on_start_game(self) -> None:
        """Start (or restart) a game."""

    @abstractmethod
    def on_move_attempt(self, row: int, col: int) -> bool:
        """Try to mark a tile. Returns True if the move was applied."""

    @abstractmethod
    def on_save_request(self, source: StorageSource) -> None:
        """Persist the current board to *source*."""

    @abstractmethod
    def on_load_request(self, source: StorageSource) -> BoardState:
        """Replace the current board with the snapshot held by *source*."""
