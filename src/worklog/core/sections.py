"""Header-delimited sections of the worklog and date-range filtering."""

import re
from dataclasses import dataclass, field
from datetime import date

HEADER_MARKER = "#"

# Dates in parentheses like (Jul 29, 2025) or (July 29, 2025)
DATE_PATTERN = re.compile(r"\(([A-Za-z]{3,9})\s+(\d{1,2}),\s+(\d{4})\)")

MONTHS = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}


@dataclass
class Section:
    """A header line and the lines up to the next header.

    The preamble before the first header has no header line.
    """

    header: str | None = None
    body: list[str] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        return ([self.header] if self.header is not None else []) + self.body

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    @property
    def entry_dates(self) -> list[date]:
        """Dates of all dated entries in the section body."""
        dates = (parse_entry_date(line) for line in self.body)
        return [d for d in dates if d is not None]

    def has_entry_between(self, start: date, end: date) -> bool:
        return any(start <= d <= end for d in self.entry_dates)

    def is_blank(self) -> bool:
        return not self.text.strip()


def is_header(line: str) -> bool:
    return line.startswith(HEADER_MARKER)


def parse_entry_date(line: str) -> date | None:
    """Parse the first parenthesized date token on a line.

    Only the first token counts. If its month name is unknown or the day is
    impossible, the line has no date.
    """
    match = DATE_PATTERN.search(line)
    if match is None:
        return None

    month_name, day, year = match.groups()
    month = MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def split_sections(content: str) -> list[Section]:
    """Split a Markdown document into header-delimited sections.

    A leading preamble section is only produced when the document has lines
    before its first header.
    """
    sections: list[Section] = []
    current: Section | None = None

    for line in content.splitlines():
        if is_header(line):
            if current is not None:
                sections.append(current)
            current = Section(header=line)
        else:
            if current is None:
                current = Section()
            current.body.append(line)

    if current is not None:
        sections.append(current)

    return sections


def filter_sections(content: str, start: date, end: date) -> str:
    """Keep only sections with at least one entry dated within [start, end].

    Retained sections keep their original order and are separated by a blank
    line. Malformed date text never raises; it just doesn't match.
    """
    kept = [
        section.text
        for section in split_sections(content)
        if section.has_entry_between(start, end) and not section.is_blank()
    ]
    return "\n".join(kept)
