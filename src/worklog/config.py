"""Configuration management for Worklog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WORKLOG_HOME = Path(os.environ.get("WORKLOG_HOME", Path.home() / ".worklog"))
CONFIG_FILE = WORKLOG_HOME / "worklog.conf"
DATA_DIR = WORKLOG_HOME / "data"

WORKLOG_FILENAME = "worklog.md"
BACKUP_DIRNAME = "backups"


@dataclass
class Config:
    """Worklog configuration."""

    data_dir: str = str(DATA_DIR)
    # OpenAI chat completions settings
    model: str = "gpt-4o"
    api_base: str = "https://api.openai.com/v1"
    max_tokens: int = 4000
    temperature: float = 0.1
    timeout: int = 30
    # Keyring entry holding the API key
    keyring_service: str = "worklog-app"
    keyring_account: str = "openai_key"

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()

    @property
    def worklog_path(self) -> Path:
        """Path of the live worklog document."""
        return self.data_path / WORKLOG_FILENAME

    @property
    def backup_dir(self) -> Path:
        """Directory holding timestamped snapshots."""
        return self.data_path / BACKUP_DIRNAME


def _parse_number(key: str, value: str, cast, default):
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {key.upper()} value: {value!r}")
        return default


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from worklog.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_dir":
                config.data_dir = value
            case "model":
                config.model = value
            case "api_base":
                config.api_base = value.rstrip("/")
            case "max_tokens":
                config.max_tokens = _parse_number(key, value, int, config.max_tokens)
            case "temperature":
                config.temperature = _parse_number(key, value, float, config.temperature)
            case "timeout":
                config.timeout = _parse_number(key, value, int, config.timeout)
            case "keyring_service":
                config.keyring_service = value
            case "keyring_account":
                config.keyring_account = value

    return config
