"""BoardState - tile occupancy, side to move and end-of-game flags."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import isqrt

from tacto.core.enums import Player
from tacto.core.types import TileIndex
from tacto.errors import InvalidMove

Tile = Player | None  # None is the Empty tile


class BoardState:
    """Mutable board of ``Player | None`` tiles in row-major order.

    ``won`` and ``tied`` are never both set.  Once either is set the board
    refuses further marks until :meth:`reset`.
    """

    __slots__ = ("_cells", "current_player", "won", "tied")

    def __init__(
        self,
        cells: Iterable[Tile],
        current_player: Player = Player.A,
        won: bool = False,
        tied: bool = False,
    ) -> None:
        if won and tied:
            raise ValueError("A board cannot be both won and tied")
        self._cells: list[Tile] = list(cells)
        self.current_player = current_player
        self.won = won
        self.tied = tied

    @classmethod
    def empty(cls, length: int) -> BoardState:
        return cls([None] * length)

    # -- Element access -----------------------------------------------------

    @property
    def cells(self) -> list[Tile]:
        return self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: TileIndex) -> Tile:
        return self._cells[index]

    def is_empty(self, index: TileIndex) -> bool:
        return self._cells[index] is None

    def occupied(self) -> Iterator[tuple[TileIndex, Player]]:
        """``(index, owner)`` for every non-empty tile, in index order."""
        for index, tile in enumerate(self._cells):
            if tile is not None:
                yield index, tile

    def is_full(self) -> bool:
        return all(tile is not None for tile in self._cells)

    @property
    def is_finished(self) -> bool:
        return self.won or self.tied

    # -- Mutation -----------------------------------------------------------

    def reset(self) -> None:
        self._cells = [None] * len(self._cells)
        self.current_player = Player.A
        self.won = False
        self.tied = False

    def place_mark(self, index: TileIndex, player: Player) -> None:
        """Give the tile at *index* to *player*.

        Raises :class:`InvalidMove` if the index is out of range, the tile is
        taken, or the game is already over.
        """
        if not 0 <= index < len(self._cells):
            raise InvalidMove(f"Tile index {index} out of range 0..{len(self._cells) - 1}")
        if self.is_finished:
            raise InvalidMove("Game is already over")
        occupant = self._cells[index]
        if occupant is not None:
            raise InvalidMove(f"Tile {index} is already owned by {occupant}")
        self._cells[index] = player

    def copy(self) -> BoardState:
        return BoardState(self._cells, self.current_player, self.won, self.tied)

    # -- Serialization ------------------------------------------------------

    def serialize(self) -> str:
        """Textual snapshot suitable for a key-value string store."""
        from tacto.core.snapshot import StoredSnapshot

        return StoredSnapshot.from_board(self).to_text()

    @classmethod
    def deserialize(cls, text: str) -> BoardState:
        """Rebuild a board from :meth:`serialize` output.

        Raises :class:`~tacto.errors.CorruptState` on malformed text.
        """
        from tacto.core.snapshot import StoredSnapshot

        return StoredSnapshot.from_text(text).to_board()

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            self._cells == other._cells
            and self.current_player == other.current_player
            and self.won == other.won
            and self.tied == other.tied
        )

    def __repr__(self) -> str:
        side = isqrt(len(self._cells))
        if side * side != len(self._cells) or side == 0:
            return (
                f"BoardState(cells={self._cells!r}, current_player={self.current_player!r}, "
                f"won={self.won}, tied={self.tied})"
            )
        rows: list[str] = []
        for row in range(side):
            chunk = self._cells[row * side : (row + 1) * side]
            rows.append(" ".join(tile.name if tile is not None else "." for tile in chunk))
        flags = "won" if self.won else "tied" if self.tied else "to move"
        rows.append(f"{self.current_player.name} {flags}")
        return "\n".join(rows)
