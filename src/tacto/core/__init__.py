"""Core domain layer: pure grid-game logic with no Qt dependency.

Quick start::

    from tacto.core import BoardState, GridSize, Player, Rules

    size = GridSize.square(3)
    board = BoardState.empty(size.length)
    board.place_mark(size.to_index(1, 1), Player.A)
"""

from tacto.core.board import BoardState, Tile
from tacto.core.enums import GamePhase, Player, StorageSource
from tacto.core.rules import Rules
from tacto.core.snapshot import EMPTY_MARKER, StoredSnapshot
from tacto.core.types import GridSize, TileIndex, TilePosition

__all__ = [
    # Enums
    "GamePhase",
    "Player",
    "StorageSource",
    # Types / geometry
    "GridSize",
    "Tile",
    "TileIndex",
    "TilePosition",
    # Domain objects
    "BoardState",
    "Rules",
    # Snapshot
    "EMPTY_MARKER",
    "StoredSnapshot",
]
