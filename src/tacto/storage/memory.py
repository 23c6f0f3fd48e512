"""Process-lifetime backend."""

from __future__ import annotations

from collections.abc import Sequence

from tacto.core.board import BoardState, Tile
from tacto.core.enums import Player, StorageSource


class VolatileStorage:
    """Holds at most one snapshot in memory.

    The snapshot dies with the instance, so switching away from this
    backend discards it.
    """

    __slots__ = ("_stored",)

    source = StorageSource.VOLATILE

    def __init__(self) -> None:
        self._stored: BoardState | None = None

    @property
    def has_snapshot(self) -> bool:
        return self._stored is not None

    def save(
        self,
        cells: Sequence[Tile],
        current_player: Player,
        won: bool,
        tied: bool,
    ) -> None:
        self._stored = BoardState(cells, current_player, won, tied)

    def load(self) -> BoardState | None:
        # Hand out a copy so the caller cannot mutate the stored snapshot.
        return self._stored.copy() if self._stored is not None else None
