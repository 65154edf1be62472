"""File-based worklog storage adapter."""

import logging
from pathlib import Path

from worklog.errors import StorageError

logger = logging.getLogger(__name__)


class FileWorklogStore:
    """
    File-based worklog storage.

    Implements WorklogStore protocol. The whole log is one markdown file that
    is always rewritten in full.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read(self) -> str | None:
        """Read the worklog. Returns None if not found."""
        if not self.path.exists():
            return None
        try:
            return self.path.read_text()
        except OSError as e:
            raise StorageError(f"Failed to read worklog: {e}") from e

    def write(self, content: str) -> None:
        """Overwrite the worklog with new content."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content)
        except OSError as e:
            raise StorageError(f"Failed to write worklog: {e}") from e

    def exists(self) -> bool:
        """Check if the worklog exists."""
        return self.path.exists()

    def read_or_create(self, default: str) -> str:
        """Read the worklog, writing `default` first if it doesn't exist."""
        content = self.read()
        if content is None:
            logger.info(f"Creating new worklog at {self.path}")
            self.write(default)
            return default
        return content
