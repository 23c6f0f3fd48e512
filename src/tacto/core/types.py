"""Grid geometry: (row, column) <-> linear index for an N×N board.

Layout is row-major::

    (0, 0)=0, (0, 1)=1, ..., (0, N-1)=N-1
    (1, 0)=N, ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, TypeAlias

from tacto.errors import InvalidBoardSize

TileIndex: TypeAlias = int


class TilePosition(NamedTuple):
    """A single grid position, as reported by a tile click."""

    row: int
    column: int


@dataclass(frozen=True, slots=True)
class GridSize:
    """Immutable board dimensions. Only positive squares are accepted."""

    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.rows != self.columns:
            raise InvalidBoardSize(
                f"A valid board size is only N * N, got {self.rows}x{self.columns}"
            )
        if self.rows <= 0:
            raise InvalidBoardSize(f"Board size must be positive, got {self.rows}")

    @classmethod
    def square(cls, n: int) -> GridSize:
        return cls(n, n)

    @property
    def length(self) -> int:
        """Number of tiles on the board."""
        return self.rows * self.columns

    def to_index(self, row: int, col: int) -> TileIndex:
        """Linear index of (*row*, *col*). Range is checked by the caller."""
        return row * self.columns + col

    def to_row_col(self, index: TileIndex) -> TilePosition:
        """Position of linear *index*. Range is checked by the caller."""
        return TilePosition(index // self.columns, index % self.columns)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.length

    def __str__(self) -> str:
        return f"{self.rows}x{self.columns}"
