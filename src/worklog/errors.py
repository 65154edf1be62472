"""Worklog exceptions.

Every error carries a flat, human-readable message that is shown to the user
as-is. There are no error codes.
"""


class WorklogError(Exception):
    """Base class for all worklog failures."""

    pass


class CredentialError(WorklogError):
    """Raised when the credential store cannot be accessed."""

    pass


class MissingCredentialError(CredentialError):
    """Raised when no API key has been stored."""

    pass


class StorageError(WorklogError):
    """Raised when the live worklog cannot be read or written."""

    pass


class NotFoundError(StorageError):
    """Raised when the live worklog does not exist."""

    pass


class BackupError(StorageError):
    """Raised when a backup cannot be created, read, restored or removed."""

    pass


class NoBackupsError(BackupError):
    """Raised when there is nothing to undo."""

    pass


class DateFormatError(WorklogError):
    """Raised when a report date is not in YYYY-MM-DD form."""

    pass


class EmptyRangeError(WorklogError):
    """Raised when no worklog section falls within the requested range."""

    pass


class LLMError(WorklogError):
    """Raised when the text-generation service fails."""

    pass
