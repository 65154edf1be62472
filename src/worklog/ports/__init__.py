"""Ports - interfaces/protocols for external dependencies."""

from .worklog_store import WorklogStore
from .backup_store import BackupStore
from .llm_service import LLMService
from .credential_store import CredentialStore

__all__ = [
    "WorklogStore",
    "BackupStore",
    "LLMService",
    "CredentialStore",
]
