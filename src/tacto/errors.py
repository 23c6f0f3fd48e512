"""Exception hierarchy raised by the game engine and its storage layer."""

from __future__ import annotations


class TactoError(Exception):
    """Base class for every error the engine surfaces to its caller."""


class InvalidBoardSize(TactoError, ValueError):
    """Board dimensions are not a positive N×N square."""


class InvalidMove(TactoError, ValueError):
    """A mark was placed out of range, on an occupied tile, or after the game ended."""


class NoSavedState(TactoError, LookupError):
    """A load was requested but the backend holds no snapshot."""


class CorruptState(TactoError, ValueError):
    """A persisted snapshot is malformed or does not fit the current board."""


class UnknownStorageSource(TactoError, ValueError):
    """A storage source outside :class:`~tacto.core.enums.StorageSource` was requested."""
