"""Game session settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tacto.core.enums import StorageSource
from tacto.core.types import GridSize
from tacto.storage.durable import DEFAULT_STATE_KEY, QSettingsStore


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Board
    rows: int = 3
    columns: int = 3

    # Storage
    default_source: StorageSource = StorageSource.DURABLE
    settings_organization: str = "tacto"
    settings_application: str = "tacto"
    settings_path: Path | None = None  # INI file instead of native settings
    state_key: str = DEFAULT_STATE_KEY

    @property
    def grid_size(self) -> GridSize:
        """Validated board size. Raises ``InvalidBoardSize``."""
        return GridSize(self.rows, self.columns)

    def create_store(self) -> QSettingsStore:
        return QSettingsStore(
            self.settings_organization,
            self.settings_application,
            path=self.settings_path,
        )
