"""Tests for the volatile backend."""

from tacto.core.board import BoardState
from tacto.core.enums import Player, StorageSource
from tacto.storage.memory import VolatileStorage

A, B = Player.A, Player.B


class TestVolatileStorage:
    def test_source(self) -> None:
        assert VolatileStorage().source == StorageSource.VOLATILE

    def test_load_without_save_is_none(self) -> None:
        storage = VolatileStorage()
        assert storage.load() is None
        assert not storage.has_snapshot

    def test_save_then_load(self) -> None:
        storage = VolatileStorage()
        storage.save([A, None, B, None], B, False, False)
        assert storage.load() == BoardState([A, None, B, None], B)

    def test_save_overwrites(self) -> None:
        storage = VolatileStorage()
        storage.save([A, None, None, None], B, False, False)
        storage.save([A, B, A, B], A, False, True)
        assert storage.load() == BoardState([A, B, A, B], A, tied=True)

    def test_saved_cells_are_copied(self) -> None:
        storage = VolatileStorage()
        cells: list[Player | None] = [None, None, None, None]
        storage.save(cells, A, False, False)
        cells[0] = B
        loaded = storage.load()
        assert loaded is not None and loaded[0] is None

    def test_loaded_board_does_not_alias_storage(self) -> None:
        storage = VolatileStorage()
        storage.save([None] * 4, A, False, False)
        first = storage.load()
        assert first is not None
        first.place_mark(0, A)
        second = storage.load()
        assert second is not None and second[0] is None
