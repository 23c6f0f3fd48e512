"""Snapshot parsing and serialization.

Text form is a single JSON object::

    {"cells": ["PlayerA", "", "PlayerB", ...], "currentPlayer": "PlayerA",
     "won": 0, "tied": 0}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from tacto.core.board import BoardState
from tacto.core.enums import Player
from tacto.errors import CorruptState

EMPTY_MARKER = ""


@dataclass(frozen=True, slots=True)
class StoredSnapshot:
    """Storage-boundary form of a :class:`BoardState`."""

    cells: tuple[str, ...]
    current_player: str
    won: int
    tied: int

    # -- Board conversion ---------------------------------------------------

    @classmethod
    def from_board(cls, board: BoardState) -> StoredSnapshot:
        return cls(
            cells=tuple(
                tile.marker if tile is not None else EMPTY_MARKER for tile in board.cells
            ),
            current_player=board.current_player.marker,
            won=int(board.won),
            tied=int(board.tied),
        )

    def to_board(self) -> BoardState:
        try:
            cells = [
                Player.from_marker(marker) if marker != EMPTY_MARKER else None
                for marker in self.cells
            ]
            current = Player.from_marker(self.current_player)
        except ValueError as exc:
            raise CorruptState(str(exc)) from exc

        for name, flag in (("won", self.won), ("tied", self.tied)):
            if flag not in (0, 1):
                raise CorruptState(f"Invalid snapshot flag {name}={flag!r}")
        if self.won and self.tied:
            raise CorruptState("Snapshot is marked both won and tied")

        return BoardState(cells, current, bool(self.won), bool(self.tied))

    # -- Text codec ---------------------------------------------------------

    def to_text(self) -> str:
        return json.dumps(
            {
                "cells": list(self.cells),
                "currentPlayer": self.current_player,
                "won": self.won,
                "tied": self.tied,
            },
            separators=(",", ":"),
        )

    @classmethod
    def from_text(cls, text: str) -> StoredSnapshot:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptState(f"Snapshot is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CorruptState(f"Snapshot must be a JSON object, got {type(data).__name__}")

        cells = _require(data, "cells", list)
        if not all(isinstance(marker, str) for marker in cells):
            raise CorruptState("Snapshot cells must all be strings")
        return cls(
            cells=tuple(cells),
            current_player=_require(data, "currentPlayer", str),
            won=_require(data, "won", int),
            tied=_require(data, "tied", int),
        )


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise CorruptState(f"Snapshot is missing {key!r}")
    value = data[key]
    # bool is an int subclass; the format stores flags as 0/1 only.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise CorruptState(f"Snapshot field {key!r} has wrong type {type(value).__name__}")
    return value
