"""Tests for snapshot serialization."""

import json

import pytest

from tacto.core.board import BoardState
from tacto.core.enums import Player
from tacto.core.snapshot import StoredSnapshot
from tacto.errors import CorruptState

A, B = Player.A, Player.B


class TestSerialize:
    def test_format(self) -> None:
        board = BoardState([A, None, B, None], B)
        data = json.loads(board.serialize())
        assert data == {
            "cells": ["PlayerA", "", "PlayerB", ""],
            "currentPlayer": "PlayerB",
            "won": 0,
            "tied": 0,
        }

    def test_flags_as_ints(self) -> None:
        data = json.loads(BoardState([A], A, won=True).serialize())
        assert data["won"] == 1
        assert data["tied"] == 0

    @pytest.mark.parametrize(
        "board",
        [
            BoardState.empty(9),
            BoardState([A, B, None, None, A, None, None, None, None], B),
            BoardState([A, A, A, B, B, None, None, None, None], A, won=True),
            BoardState([A, B, A, A, B, B, B, A, A], A, tied=True),
        ],
        ids=["empty", "partial", "won", "full-tied"],
    )
    def test_round_trip(self, board: BoardState) -> None:
        assert BoardState.deserialize(board.serialize()) == board


class TestDeserializeErrors:
    def _text(self, **overrides: object) -> str:
        data: dict[str, object] = {
            "cells": ["PlayerA", "", "", ""],
            "currentPlayer": "PlayerB",
            "won": 0,
            "tied": 0,
        }
        data.update(overrides)
        return json.dumps(data)

    def test_valid_baseline(self) -> None:
        board = BoardState.deserialize(self._text())
        assert board.cells == [A, None, None, None]
        assert board.current_player == B

    def test_not_json(self) -> None:
        with pytest.raises(CorruptState, match="not valid JSON"):
            BoardState.deserialize("{cells:")

    def test_not_an_object(self) -> None:
        with pytest.raises(CorruptState, match="JSON object"):
            BoardState.deserialize("[1, 2]")

    def test_missing_key(self) -> None:
        data = json.loads(self._text())
        del data["currentPlayer"]
        with pytest.raises(CorruptState, match="currentPlayer"):
            BoardState.deserialize(json.dumps(data))

    def test_unknown_marker(self) -> None:
        with pytest.raises(CorruptState, match="marker"):
            BoardState.deserialize(self._text(cells=["PlayerZ", "", "", ""]))

    def test_non_string_cell(self) -> None:
        with pytest.raises(CorruptState, match="strings"):
            BoardState.deserialize(self._text(cells=[1, "", "", ""]))

    def test_bool_flag_rejected(self) -> None:
        with pytest.raises(CorruptState, match="won"):
            BoardState.deserialize(self._text(won=True))

    def test_flag_out_of_range(self) -> None:
        with pytest.raises(CorruptState, match="tied"):
            BoardState.deserialize(self._text(tied=2))

    def test_won_and_tied(self) -> None:
        with pytest.raises(CorruptState, match="both"):
            BoardState.deserialize(self._text(won=1, tied=1))

    def test_corrupt_state_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            StoredSnapshot.from_text("nope")
