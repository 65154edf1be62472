"""Tests for the shared workflow layer."""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from worklog.config import Config
from worklog.core.prompts import DEFAULT_WORKLOG, MERGE_SYSTEM_PROMPT, REPORT_SYSTEM_PROMPTS, ReportStyle
from worklog.errors import (
    DateFormatError,
    EmptyRangeError,
    LLMError,
    MissingCredentialError,
    NoBackupsError,
    NotFoundError,
    WorklogError,
)
from worklog.workflows import (
    api_key_status,
    append_entries,
    delete_api_key,
    generate_report,
    get_llm,
    list_backups,
    read_worklog,
    save_api_key,
    undo_last_change,
)

SAMPLE_LOG = """# Daily Work Log

## Products
- Shipped pricing page (Jul 1, 2025)

## Infra
- Migrated CI runners (Jan 1, 2024)
"""


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=str(tmp_path))


@pytest.fixture
def llm():
    mock = MagicMock()
    mock.generate.return_value = "# Updated log\n"
    return mock


class TestReadWorklog:
    def test_creates_default(self, config):
        assert read_worklog(config) == DEFAULT_WORKLOG
        assert config.worklog_path.read_text() == DEFAULT_WORKLOG

    def test_returns_existing(self, config):
        config.worklog_path.write_text(SAMPLE_LOG)
        assert read_worklog(config) == SAMPLE_LOG


class TestAppendEntries:
    def test_merges_and_saves(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)

        result = append_entries(config, ["Launched beta"], llm=llm, today=date(2025, 7, 29))

        assert result == "# Updated log\n"
        assert config.worklog_path.read_text() == "# Updated log\n"
        system_prompt, user_prompt = llm.generate.call_args[0]
        assert system_prompt == MERGE_SYSTEM_PROMPT
        assert SAMPLE_LOG in user_prompt
        assert "Launched beta" in user_prompt
        assert "(Jul 29, 2025)" in user_prompt

    def test_snapshots_before_merge(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)

        append_entries(config, ["Launched beta"], llm=llm)

        backups = list_backups(config)
        assert len(backups) == 1
        assert backups[0].read_text() == SAMPLE_LOG

    def test_bootstraps_default_when_missing(self, config, llm):
        def check_bootstrapped(system_prompt, user_prompt):
            assert config.worklog_path.read_text() == DEFAULT_WORKLOG
            return "# Updated log\n"

        llm.generate.side_effect = check_bootstrapped

        append_entries(config, ["First win"], llm=llm)

        assert DEFAULT_WORKLOG in llm.generate.call_args[0][1]
        assert list_backups(config)[0].read_text() == DEFAULT_WORKLOG

    def test_joins_entries_and_drops_blanks(self, config, llm):
        append_entries(config, ["  One  ", "", "   ", "Two"], llm=llm)

        user_prompt = llm.generate.call_args[0][1]
        assert user_prompt.endswith("One\nTwo")

    def test_no_entries(self, config, llm):
        with pytest.raises(WorklogError, match="No entries provided"):
            append_entries(config, ["", "  "], llm=llm)

        llm.generate.assert_not_called()
        assert not config.worklog_path.exists()

    def test_llm_failure_leaves_worklog_and_keeps_snapshot(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)
        llm.generate.side_effect = LLMError('OpenAI API error: {"error": "rate limited"}')

        with pytest.raises(LLMError, match="rate limited"):
            append_entries(config, ["Launched beta"], llm=llm)

        assert config.worklog_path.read_text() == SAMPLE_LOG
        assert len(list_backups(config)) == 1

    @patch("worklog.workflows.KeyringCredentialStore")
    def test_missing_key_touches_nothing(self, mock_cls, config):
        mock_cls.return_value.get.side_effect = MissingCredentialError("OpenAI API key not found.")

        with pytest.raises(MissingCredentialError):
            append_entries(config, ["Launched beta"])

        assert not config.worklog_path.exists()
        assert list_backups(config) == []


class TestUndo:
    def test_undo_restores_previous_log(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)
        append_entries(config, ["Launched beta"], llm=llm)

        undo_last_change(config)

        assert config.worklog_path.read_text() == SAMPLE_LOG
        assert list_backups(config) == []

    def test_undo_without_backups(self, config):
        config.worklog_path.write_text(SAMPLE_LOG)
        config.backup_dir.mkdir()

        with pytest.raises(NoBackupsError, match="No backup files found"):
            undo_last_change(config)

        assert config.worklog_path.read_text() == SAMPLE_LOG


class TestGenerateReport:
    def test_filters_and_generates(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)
        llm.generate.return_value = "# Report\n"

        result = generate_report(config, "2025-01-01", "2025-12-31", "executive", llm=llm)

        assert result == "# Report\n"
        system_prompt, user_prompt = llm.generate.call_args[0]
        assert system_prompt == REPORT_SYSTEM_PROMPTS[ReportStyle.EXECUTIVE]
        assert "## Products" in user_prompt
        assert "## Infra" not in user_prompt
        assert "from 2025-01-01 to 2025-12-31" in user_prompt

    def test_does_not_modify_worklog(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)

        generate_report(config, "2025-01-01", "2025-12-31", "detailed", llm=llm)

        assert config.worklog_path.read_text() == SAMPLE_LOG
        assert list_backups(config) == []

    def test_unknown_style_uses_default_instruction(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)

        generate_report(config, "2025-01-01", "2025-12-31", "limerick", llm=llm)

        assert llm.generate.call_args[0][0] == REPORT_SYSTEM_PROMPTS[ReportStyle.DEFAULT]

    def test_missing_worklog(self, config, llm):
        with pytest.raises(NotFoundError, match="Worklog file not found"):
            generate_report(config, "2025-01-01", "2025-12-31", "executive", llm=llm)

        assert not config.worklog_path.exists()

    @patch("worklog.workflows.OpenAIChatService")
    @patch("worklog.workflows.KeyringCredentialStore")
    def test_invalid_start_date_makes_no_call(self, mock_creds, mock_service, config):
        config.worklog_path.write_text(SAMPLE_LOG)

        with pytest.raises(DateFormatError) as exc_info:
            generate_report(config, "2025-13-01", "2025-12-31", "executive")

        assert str(exc_info.value) == "Invalid start date format. Use YYYY-MM-DD."
        mock_creds.assert_not_called()
        mock_service.assert_not_called()

    def test_invalid_end_date(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)

        with pytest.raises(DateFormatError, match="Invalid end date format"):
            generate_report(config, "2025-01-01", "12/31/2025", "executive", llm=llm)

        llm.generate.assert_not_called()

    def test_no_entries_in_range(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)

        with pytest.raises(EmptyRangeError, match="No entries found in the specified date range"):
            generate_report(config, "2030-01-01", "2030-12-31", "executive", llm=llm)

        llm.generate.assert_not_called()

    def test_propagates_llm_errors(self, config, llm):
        config.worklog_path.write_text(SAMPLE_LOG)
        llm.generate.side_effect = LLMError("OpenAI API request failed: timed out")

        with pytest.raises(LLMError, match="timed out"):
            generate_report(config, "2025-01-01", "2025-12-31", "executive", llm=llm)


class TestGetLLM:
    @patch("worklog.workflows.OpenAIChatService")
    @patch("worklog.workflows.KeyringCredentialStore")
    def test_builds_service_from_config(self, mock_creds, mock_service):
        mock_creds.return_value.get.return_value = "sk-test"
        config = Config(model="gpt-4o-mini", timeout=10, keyring_service="svc", keyring_account="acct")

        get_llm(config)

        mock_creds.assert_called_once_with("svc", "acct")
        mock_service.assert_called_once_with(
            "sk-test",
            model="gpt-4o-mini",
            api_base=config.api_base,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            timeout=10,
        )


class TestApiKey:
    @patch("worklog.workflows.KeyringCredentialStore")
    def test_save_strips_key(self, mock_cls, config):
        save_api_key(config, "  sk-test \n")
        mock_cls.return_value.set.assert_called_once_with("sk-test")

    @patch("worklog.workflows.KeyringCredentialStore")
    def test_save_rejects_empty(self, mock_cls, config):
        with pytest.raises(WorklogError, match="cannot be empty"):
            save_api_key(config, "   ")
        mock_cls.return_value.set.assert_not_called()

    @patch("worklog.workflows.KeyringCredentialStore")
    def test_status(self, mock_cls, config):
        mock_cls.return_value.exists.return_value = True
        assert api_key_status(config) is True

    @patch("worklog.workflows.KeyringCredentialStore")
    def test_delete(self, mock_cls, config):
        delete_api_key(config)
        mock_cls.return_value.delete.assert_called_once_with()
