"""Backup storage interface."""

from pathlib import Path
from typing import Protocol


class BackupStore(Protocol):
    """Interface for snapshotting the worklog and undoing changes."""

    def snapshot(self, content: str) -> Path:
        """Save a timestamped copy of content. Returns the snapshot path."""
        ...

    def restore_latest(self) -> Path:
        """Restore the newest snapshot over the worklog and consume it."""
        ...

    def list_snapshots(self) -> list[Path]:
        """List snapshots, newest first."""
        ...
