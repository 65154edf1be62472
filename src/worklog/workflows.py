"""Shared workflow layer behind the CLI.

Each function resolves its adapters from a Config, so nothing depends on
module-level paths. Text generation can be injected via `llm`; otherwise an
OpenAI client is built from the stored API key.
"""

import logging
from datetime import date, datetime
from pathlib import Path

from .adapters.file_backups import FileBackupStore
from .adapters.file_worklog import FileWorklogStore
from .adapters.keyring_store import KeyringCredentialStore
from .adapters.openai_chat import OpenAIChatService
from .config import Config
from .core.prompts import (
    DEFAULT_WORKLOG,
    MERGE_SYSTEM_PROMPT,
    build_merge_prompt,
    build_report_prompt,
    report_system_prompt,
)
from .core.sections import filter_sections
from .errors import DateFormatError, EmptyRangeError, NotFoundError, WorklogError
from .ports import BackupStore, CredentialStore, LLMService

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileWorklogStore:
    return FileWorklogStore(config.worklog_path)


def get_backups(config: Config) -> BackupStore:
    return FileBackupStore(config.backup_dir, get_store(config))


def get_credentials(config: Config) -> CredentialStore:
    return KeyringCredentialStore(config.keyring_service, config.keyring_account)


def get_llm(config: Config) -> OpenAIChatService:
    """Build the OpenAI client from the stored API key."""
    api_key = get_credentials(config).get()
    return OpenAIChatService(
        api_key,
        model=config.model,
        api_base=config.api_base,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        timeout=config.timeout,
    )


# ============== Worklog ==============


def read_worklog(config: Config) -> str:
    """Return the worklog, creating the default one if missing."""
    return get_store(config).read_or_create(DEFAULT_WORKLOG)


def append_entries(
    config: Config,
    entries: list[str],
    llm: LLMService | None = None,
    today: date | None = None,
) -> str:
    """
    Merge new entries into the worklog via the LLM and save the result.

    The current log is backed up first. If generation fails the worklog is
    left as it was and the backup is kept.
    """
    entries = [e.strip() for e in entries if e.strip()]
    if not entries:
        raise WorklogError("No entries provided.")

    llm = llm or get_llm(config)

    store = get_store(config)
    current_log = store.read_or_create(DEFAULT_WORKLOG)
    get_backups(config).snapshot(current_log)

    user_prompt = build_merge_prompt(current_log, entries, today)
    updated = llm.generate(MERGE_SYSTEM_PROMPT, user_prompt)

    store.write(updated)
    logger.info(f"Merged {len(entries)} entries into {store.path}")
    return updated


def undo_last_change(config: Config) -> Path:
    """Restore the most recent backup. Returns the consumed backup path."""
    return get_backups(config).restore_latest()


def list_backups(config: Config) -> list[Path]:
    """Backups, newest first."""
    return get_backups(config).list_snapshots()


# ============== Reports ==============


def parse_report_date(value: str, label: str) -> date:
    """Parse a YYYY-MM-DD date, raising DateFormatError naming the field."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise DateFormatError(f"Invalid {label} date format. Use YYYY-MM-DD.")


def generate_report(
    config: Config,
    start_date: str,
    end_date: str,
    style: str,
    llm: LLMService | None = None,
) -> str:
    """
    Generate a styled summary of worklog sections within a date range.

    Validation happens before any API key lookup or network call.
    """
    current_log = get_store(config).read()
    if current_log is None:
        raise NotFoundError("Worklog file not found. Please add some entries first.")

    start = parse_report_date(start_date, "start")
    end = parse_report_date(end_date, "end")

    filtered = filter_sections(current_log, start, end)
    if not filtered.strip():
        raise EmptyRangeError("No entries found in the specified date range.")

    llm = llm or get_llm(config)
    return llm.generate(
        report_system_prompt(style),
        build_report_prompt(style, start, end, filtered),
    )


# ============== API key ==============


def save_api_key(config: Config, api_key: str) -> None:
    api_key = api_key.strip()
    if not api_key:
        raise WorklogError("API key cannot be empty.")
    get_credentials(config).set(api_key)


def api_key_status(config: Config) -> bool:
    return get_credentials(config).exists()


def delete_api_key(config: Config) -> None:
    get_credentials(config).delete()
