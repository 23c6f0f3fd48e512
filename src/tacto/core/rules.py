"""Win and tie detection for an N×N board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from tacto.core.enums import Player
from tacto.core.types import GridSize, TileIndex

if TYPE_CHECKING:
    from tacto.core.board import BoardState


class Rules:
    """Static rule-checker that operates on a :class:`BoardState`."""

    @staticmethod
    def lines(size: GridSize) -> Iterator[tuple[TileIndex, ...]]:
        """Every line in evaluation order.

        Rows top to bottom, columns left to right, main diagonal, then
        anti-diagonal.
        """
        n = size.columns
        for row in range(size.rows):
            yield tuple(size.to_index(row, col) for col in range(n))
        for col in range(n):
            yield tuple(size.to_index(row, col) for row in range(size.rows))
        yield tuple(size.to_index(i, i) for i in range(n))
        yield tuple(size.to_index(i, n - 1 - i) for i in range(n))

    @staticmethod
    def line_owner(board: BoardState, line: tuple[TileIndex, ...]) -> Player | None:
        """Owner of *line* if every tile on it belongs to one player."""
        owner = board[line[0]]
        if owner is None:
            return None
        for index in line[1:]:
            if board[index] != owner:
                return None
        return owner

    @staticmethod
    def winning_line(
        board: BoardState, size: GridSize
    ) -> tuple[Player, tuple[TileIndex, ...]] | None:
        """First completed line and its owner, or ``None``."""
        for line in Rules.lines(size):
            owner = Rules.line_owner(board, line)
            if owner is not None:
                return owner, line
        return None

    @staticmethod
    def winner(board: BoardState, size: GridSize) -> Player | None:
        found = Rules.winning_line(board, size)
        return found[0] if found is not None else None

    @staticmethod
    def is_tie(board: BoardState, size: GridSize) -> bool:
        """Full board with no completed line."""
        return board.is_full() and Rules.winning_line(board, size) is None
