"""Storage layer: pluggable backends for saving and restoring a board.

Quick start::

    from tacto.core import StorageSource
    from tacto.storage import create_storage

    storage = create_storage(StorageSource.VOLATILE)
    storage.save(board.cells, board.current_player, board.won, board.tied)
"""

from __future__ import annotations

from tacto.core.enums import StorageSource
from tacto.errors import UnknownStorageSource
from tacto.storage.durable import DEFAULT_STATE_KEY, DurableStorage, QSettingsStore
from tacto.storage.interfaces import BoardStorage, KeyValueStore
from tacto.storage.memory import VolatileStorage


def create_storage(
    source: StorageSource,
    *,
    store: KeyValueStore | None = None,
    key: str = DEFAULT_STATE_KEY,
) -> BoardStorage:
    """Build the backend for *source*.

    *store* is only used by the durable backend; a default ``QSettingsStore``
    is created when omitted.
    """
    if source == StorageSource.VOLATILE:
        return VolatileStorage()
    if source == StorageSource.DURABLE:
        return DurableStorage(store if store is not None else QSettingsStore(), key)
    raise UnknownStorageSource(f"Invalid storage source: {source!r}")


__all__ = [
    "DEFAULT_STATE_KEY",
    "BoardStorage",
    "DurableStorage",
    "KeyValueStore",
    "QSettingsStore",
    "VolatileStorage",
    "create_storage",
]
