"""Capability protocols for board persistence.

The engine depends on :class:`BoardStorage` only; concrete backends are
picked by :func:`tacto.storage.create_storage`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tacto.core.board import BoardState, Tile
    from tacto.core.enums import Player, StorageSource


class BoardStorage(Protocol):
    """Save/load capability shared by every backend.

    ``load`` returns ``None`` when nothing has been saved; only malformed
    persisted data raises.
    """

    @property
    def source(self) -> StorageSource: ...

    def save(
        self,
        cells: Sequence[Tile],
        current_player: Player,
        won: bool,
        tied: bool,
    ) -> None:
        """Overwrite any prior snapshot with the given board fields."""
        ...

    def load(self) -> BoardState | None:
        """Latest snapshot, or ``None`` if there is none."""
        ...


class KeyValueStore(Protocol):
    """Opaque string store used by the durable backend."""

    def get_string(self, key: str) -> str:
        """Value under *key*, or ``""`` if absent."""
        ...

    def set_string(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def sync(self) -> None:
        """Flush pending writes to the underlying medium."""
        ...
