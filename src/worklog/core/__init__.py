"""Functional core - pure business logic with no I/O."""

from .sections import Section, filter_sections, parse_entry_date, split_sections
from .prompts import (
    DEFAULT_WORKLOG,
    MERGE_SYSTEM_PROMPT,
    ReportStyle,
    build_merge_prompt,
    build_report_prompt,
    format_entry_date,
    report_system_prompt,
)

__all__ = [
    # Sections
    "Section",
    "filter_sections",
    "parse_entry_date",
    "split_sections",
    # Prompts
    "DEFAULT_WORKLOG",
    "MERGE_SYSTEM_PROMPT",
    "ReportStyle",
    "build_merge_prompt",
    "build_report_prompt",
    "format_entry_date",
    "report_system_prompt",
]
