"""File-based backup storage adapter."""

import logging
from datetime import datetime
from pathlib import Path

from worklog.errors import BackupError, NoBackupsError, StorageError
from worklog.ports.worklog_store import WorklogStore

logger = logging.getLogger(__name__)

BACKUP_PREFIX = "worklog-"
BACKUP_SUFFIX = ".md"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"


class FileBackupStore:
    """
    Timestamped snapshots of the worklog.

    Implements BackupStore protocol. Snapshots are plain markdown files named
    worklog-<timestamp>.md and are never pruned automatically.
    """

    def __init__(self, backup_dir: Path | str, worklog: WorklogStore):
        self.backup_dir = Path(backup_dir).expanduser()
        self.worklog = worklog

    def _new_snapshot_path(self, now: datetime) -> Path:
        """Pick an unused snapshot path for a timestamp."""
        stem = f"{BACKUP_PREFIX}{now.strftime(TIMESTAMP_FORMAT)}"
        path = self.backup_dir / f"{stem}{BACKUP_SUFFIX}"
        counter = 1
        while path.exists():
            path = self.backup_dir / f"{stem}-{counter}{BACKUP_SUFFIX}"
            counter += 1
        return path

    def snapshot(self, content: str, now: datetime | None = None) -> Path:
        """Save a timestamped copy of content. Returns the snapshot path."""
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupError(f"Failed to create backup directory: {e}") from e

        path = self._new_snapshot_path(now or datetime.now())
        try:
            path.write_text(content)
        except OSError as e:
            raise BackupError(f"Failed to create backup: {e}") from e

        logger.info(f"Backed up worklog to {path.name}")
        return path

    def list_snapshots(self) -> list[Path]:
        """List snapshots, newest first by modification time."""
        if not self.backup_dir.is_dir():
            return []

        try:
            candidates = [
                p
                for p in self.backup_dir.iterdir()
                if p.is_file() and p.name.startswith(BACKUP_PREFIX) and p.suffix == BACKUP_SUFFIX
            ]
            # Equal mtimes fall back to the name, which embeds the timestamp
            return sorted(candidates, key=lambda p: (p.stat().st_mtime, p.name), reverse=True)
        except OSError as e:
            raise BackupError(f"Failed to read backup directory: {e}") from e

    def restore_latest(self) -> Path:
        """
        Restore the newest snapshot over the worklog and delete it.

        Returns the path of the consumed snapshot. There is no rollback: if
        the snapshot can't be removed after restoring, the restore stands.
        """
        snapshots = self.list_snapshots()
        if not snapshots:
            raise NoBackupsError("No backup files found")

        latest = snapshots[0]
        try:
            content = latest.read_text()
        except OSError as e:
            raise BackupError(f"Failed to read backup file: {e}") from e

        try:
            self.worklog.write(content)
        except StorageError as e:
            raise BackupError(f"Failed to restore from backup: {e}") from e

        try:
            latest.unlink()
        except OSError as e:
            raise BackupError(f"Failed to remove used backup: {e}") from e

        logger.info(f"Restored worklog from {latest.name}")
        return latest
