"""Core enumerations for the grid game domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto


class Player(IntEnum):
    """Side that owns a tile."""

    A = 0
    B = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def marker(self) -> str:
        """Persisted marker string, e.g. ``"PlayerA"``."""
        return f"Player{self.name}"

    @classmethod
    def from_marker(cls, marker: str) -> Player:
        """Parse a persisted marker. Raises :class:`ValueError` if unknown."""
        if not marker.startswith("Player"):
            raise ValueError(f"Invalid player marker: {marker!r}")
        try:
            return cls[marker[len("Player") :]]
        except KeyError:
            raise ValueError(f"Invalid player marker: {marker!r}") from None

    def __str__(self) -> str:
        return self.marker


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    AWAITING_START = auto()
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.TIED)


class StorageSource(StrEnum):
    """Which persistence backend a save/load request targets."""

    VOLATILE = "volatile"
    DURABLE = "durable"
