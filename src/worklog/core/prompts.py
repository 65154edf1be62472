"""Prompt text for merging entries and generating reports."""

from datetime import date
from enum import Enum

DEFAULT_WORKLOG = (
    "# Daily Work Log\n\n"
    "This is your worklog file where daily achievements will be tracked and organized.\n"
)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MERGE_SYSTEM_PROMPT = """\
You are an AI journaling assistant that maintains a yearly worklog in Markdown format.

You will receive:
1. A list of new work wins (tasks, accomplishments)
2. The current worklog

Update the worklog as follows:

- Group all tasks under relevant **topic headers** (e.g., "Products", "Get Started Page", etc.).
- If a topic already exists in the log, append the new entries to that section.
- If the topic is new, create a new section header and add entries underneath it.
- For each entry:
  - Use the exact phrasing provided by the user.
  - Add the current date in parentheses at the end, like (Jul 29, 2025).
- Do not group tasks under "Today's entries" or any date-based header.
- Do not use the list of new entries itself as a header.
- Do not generate summaries or sub-bullets.
- Maintain a clean, organized, topical structure.

Only return the full updated Markdown document."""


class ReportStyle(Enum):
    """Report styles offered to the user."""

    EXECUTIVE = "executive"
    DETAILED = "detailed"
    CHRONOLOGICAL = "chronological"
    ACCOMPLISHMENTS = "accomplishments"
    DEFAULT = "default"

    @property
    def label(self) -> str:
        return STYLE_LABELS[self]


STYLE_LABELS = {
    ReportStyle.EXECUTIVE: "Executive Summary - high-level achievements for leadership review",
    ReportStyle.DETAILED: "Detailed Report - comprehensive view with technical details",
    ReportStyle.CHRONOLOGICAL: "Chronological - month-by-month progression timeline",
    ReportStyle.ACCOMPLISHMENTS: "Major Accomplishments - focus on significant wins and milestones",
    ReportStyle.DEFAULT: "Summary - logical overview by theme or project",
}

REPORT_SYSTEM_PROMPTS = {
    ReportStyle.EXECUTIVE: (
        "You are creating an executive summary report. Focus on high-level achievements, "
        "major milestones, and strategic accomplishments. Group by themes/projects and "
        "highlight business impact. Keep it concise and professional for leadership review."
    ),
    ReportStyle.DETAILED: (
        "You are creating a detailed report. Organize all entries by category/project, "
        "maintain specific details, and present a comprehensive view of all work completed. "
        "Include technical details and maintain the original structure while improving readability."
    ),
    ReportStyle.CHRONOLOGICAL: (
        "You are creating a chronological report. Organize entries by month, showing "
        "progression over time. Within each month, group by theme/project. This should tell "
        "the story of work evolution during the specified period."
    ),
    ReportStyle.ACCOMPLISHMENTS: (
        "You are creating an accomplishments-focused report. Filter and highlight only major "
        "achievements, completed projects, successful launches, and significant milestones. "
        "Ignore routine tasks and focus on impactful wins."
    ),
    ReportStyle.DEFAULT: (
        "You are creating a summary report. Organize the content logically by theme/project "
        "and present it in a clear, professional format suitable for review purposes."
    ),
}


def format_entry_date(d: date) -> str:
    """Format a date the way entries carry it, e.g. 'Jul 29, 2025'."""
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}, {d.year}"


def report_system_prompt(style: str) -> str:
    """System instruction for a report style.

    Unrecognized styles fall back to the generic summary instruction.
    """
    try:
        return REPORT_SYSTEM_PROMPTS[ReportStyle(style)]
    except ValueError:
        return REPORT_SYSTEM_PROMPTS[ReportStyle.DEFAULT]


def build_merge_prompt(current_log: str, entries: list[str], today: date | None = None) -> str:
    """User prompt asking to merge new entries into the current log."""
    today = today or date.today()
    new_entries = "\n".join(entries)
    return (
        f"Today's date is ({format_entry_date(today)}).\n\n"
        f"Here is the current worklog:\n\n{current_log}\n\n"
        f"Here are new work entries to add:\n\n{new_entries}"
    )


def build_report_prompt(style: str, start: date, end: date, filtered_content: str) -> str:
    """User prompt asking for a styled report over the filtered log."""
    return (
        f"Please create a {style} summary report for the period from "
        f"{start.isoformat()} to {end.isoformat()}.\n\n"
        f"Here is the filtered worklog content:\n\n{filtered_content}\n\n"
        "Generate a well-formatted, professional report in Markdown format."
    )
