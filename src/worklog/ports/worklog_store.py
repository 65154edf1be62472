"""Worklog storage interface."""

from typing import Protocol


class WorklogStore(Protocol):
    """Interface for reading and writing the live worklog document."""

    def read(self) -> str | None:
        """Read the worklog. Returns None if not found."""
        ...

    def write(self, content: str) -> None:
        """Overwrite the worklog with new content."""
        ...

    def exists(self) -> bool:
        """Check if the worklog exists."""
        ...
