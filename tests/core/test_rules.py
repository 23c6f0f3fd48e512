"""Tests for win and tie detection."""

import pytest

from tacto.core.board import BoardState
from tacto.core.enums import Player
from tacto.core.rules import Rules
from tacto.core.types import GridSize

A, B = Player.A, Player.B
SIZE3 = GridSize.square(3)


def _board(*cells: Player | None) -> BoardState:
    return BoardState(cells)


class TestLines:
    def test_line_count(self) -> None:
        assert len(list(Rules.lines(SIZE3))) == 8
        assert len(list(Rules.lines(GridSize.square(4)))) == 10

    def test_evaluation_order(self) -> None:
        lines = list(Rules.lines(SIZE3))
        assert lines[0] == (0, 1, 2)
        assert lines[2] == (6, 7, 8)
        assert lines[3] == (0, 3, 6)
        assert lines[5] == (2, 5, 8)
        assert lines[6] == (0, 4, 8)
        assert lines[7] == (2, 4, 6)


class TestWinner:
    def test_empty_board_has_no_winner(self) -> None:
        assert Rules.winner(BoardState.empty(9), SIZE3) is None

    @pytest.mark.parametrize(
        "indices",
        [(0, 1, 2), (3, 4, 5), (6, 7, 8), (0, 3, 6), (1, 4, 7), (2, 5, 8), (0, 4, 8), (2, 4, 6)],
    )
    def test_every_line_wins(self, indices: tuple[int, ...]) -> None:
        board = BoardState.empty(9)
        for i in indices:
            board.place_mark(i, B)
        assert Rules.winner(board, SIZE3) == B
        found = Rules.winning_line(board, SIZE3)
        assert found == (B, indices)

    def test_mixed_line_does_not_win(self) -> None:
        board = _board(A, A, B, None, None, None, None, None, None)
        assert Rules.winner(board, SIZE3) is None

    def test_rows_checked_before_columns(self) -> None:
        # Row 0 and column 0 are both complete; the row is reported.
        board = _board(A, A, A, A, B, None, A, B, B)
        assert Rules.winning_line(board, SIZE3) == (A, (0, 1, 2))

    def test_four_by_four_anti_diagonal(self) -> None:
        size = GridSize.square(4)
        board = BoardState.empty(16)
        for i in (3, 6, 9, 12):
            board.place_mark(i, A)
        assert Rules.winning_line(board, size) == (A, (3, 6, 9, 12))

    def test_one_by_one_board(self) -> None:
        size = GridSize.square(1)
        assert Rules.winner(_board(A), size) == A


class TestTie:
    def test_full_board_without_line_is_tie(self) -> None:
        board = _board(A, B, A, A, B, B, B, A, A)
        assert Rules.winner(board, SIZE3) is None
        assert Rules.is_tie(board, SIZE3)

    def test_full_board_with_line_is_not_tie(self) -> None:
        board = _board(A, A, A, B, B, A, B, A, B)
        assert not Rules.is_tie(board, SIZE3)

    def test_partial_board_is_not_tie(self) -> None:
        board = _board(A, B, None, None, None, None, None, None, None)
        assert not Rules.is_tie(board, SIZE3)
