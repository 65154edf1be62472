"""Adapters - I/O implementations of ports."""

from .file_worklog import FileWorklogStore
from .file_backups import FileBackupStore
from .openai_chat import OpenAIChatService
from .keyring_store import KeyringCredentialStore

__all__ = [
    "FileWorklogStore",
    "FileBackupStore",
    "OpenAIChatService",
    "KeyringCredentialStore",
]
