"""Key-value string store backend, persisted through ``QSettings``."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtCore import QSettings

from tacto.core.board import BoardState, Tile
from tacto.core.enums import Player, StorageSource
from tacto.storage.interfaces import KeyValueStore

_LOGGER = logging.getLogger(__name__)

DEFAULT_STATE_KEY = "SavedGameState"


class QSettingsStore:
    """:class:`KeyValueStore` over a :class:`QSettings` instance.

    Uses the platform's native settings location unless *path* is given, in
    which case an INI file at that path is used.
    """

    __slots__ = ("_settings",)

    def __init__(
        self,
        organization: str = "tacto",
        application: str = "tacto",
        *,
        path: Path | None = None,
    ) -> None:
        if path is not None:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)

    @property
    def location(self) -> str:
        return self._settings.fileName()

    def get_string(self, key: str) -> str:
        value = self._settings.value(key, "", type=str)
        return value or ""

    def set_string(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)

    def remove(self, key: str) -> None:
        self._settings.remove(key)

    def sync(self) -> None:
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise OSError(f"Could not write settings to {self.location}: {status.name}")


class DurableStorage:
    """Persists the latest snapshot as text under one fixed key.

    Each save overwrites the previous snapshot.  ``load`` returns ``None``
    when the key is absent or empty.
    """

    __slots__ = ("_store", "_key")

    source = StorageSource.DURABLE

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STATE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(
        self,
        cells: Sequence[Tile],
        current_player: Player,
        won: bool,
        tied: bool,
    ) -> None:
        text = BoardState(cells, current_player, won, tied).serialize()
        self._store.set_string(self._key, text)
        self._store.sync()
        _LOGGER.debug("Wrote %d-tile snapshot under %r", len(cells), self._key)

    def load(self) -> BoardState | None:
        text = self._store.get_string(self._key)
        if not text:
            return None
        return BoardState.deserialize(text)

    def clear(self) -> None:
        """Forget the stored snapshot."""
        self._store.remove(self._key)
        self._store.sync()
