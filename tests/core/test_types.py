"""Tests for grid geometry."""

import pytest

from tacto.core.types import GridSize, TilePosition
from tacto.errors import InvalidBoardSize


class TestGridSize:
    def test_square_accepted(self) -> None:
        size = GridSize(3, 3)
        assert size.length == 9
        assert str(size) == "3x3"

    def test_square_factory(self) -> None:
        assert GridSize.square(4) == GridSize(4, 4)

    def test_non_square_rejected(self) -> None:
        with pytest.raises(InvalidBoardSize, match="N \\* N"):
            GridSize(3, 4)

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_rejected(self, n: int) -> None:
        with pytest.raises(InvalidBoardSize):
            GridSize(n, n)

    def test_invalid_size_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            GridSize(2, 5)


class TestIndexMapping:
    def test_to_index_row_major(self) -> None:
        size = GridSize.square(3)
        assert size.to_index(0, 0) == 0
        assert size.to_index(0, 2) == 2
        assert size.to_index(1, 0) == 3
        assert size.to_index(2, 2) == 8

    def test_to_row_col(self) -> None:
        size = GridSize.square(4)
        assert size.to_row_col(0) == TilePosition(0, 0)
        assert size.to_row_col(5) == TilePosition(1, 1)
        assert size.to_row_col(15) == TilePosition(3, 3)

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
    def test_round_trip_every_index(self, n: int) -> None:
        size = GridSize.square(n)
        for index in range(size.length):
            assert size.to_index(*size.to_row_col(index)) == index

    def test_contains(self) -> None:
        size = GridSize.square(3)
        assert size.contains(2, 2)
        assert not size.contains(3, 0)
        assert not size.contains(0, -1)

    def test_is_valid_index(self) -> None:
        size = GridSize.square(3)
        assert size.is_valid_index(0)
        assert size.is_valid_index(8)
        assert not size.is_valid_index(9)
        assert not size.is_valid_index(-1)
