"""
Date location and normalization for syllabus deadline lines.

Two patterns are tried in order; the first one that matches decides the
line's date, even if that date later turns out to be invalid.
"""
import re
from datetime import date
from typing import Optional

# 03/15/2025, 3-15-2025 (same separator on both sides, 20xx years only)
NUMERIC_DATE_REGEX = re.compile(r"\b(\d{1,2})([/-])(\d{1,2})\2(20\d{2})\b")

# December 1, Dec 1st, Sept. 3rd 2025, March 15, 2026
MONTH_NAME_DATE_REGEX = re.compile(
    r"\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s+"
    r"(3[01]|[12]\d|0?[1-9])(?:st|nd|rd|th)?(?!\d)"
    r"(?:(?:,\s*|\s+)(\d{4})\b)?",
    re.IGNORECASE,
)

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}


def find_date_string(line: str) -> Optional[re.Match]:
    """Return the first date-looking match in the line, numeric form first."""
    return NUMERIC_DATE_REGEX.search(line) or MONTH_NAME_DATE_REGEX.search(line)


def _match_to_parts(match: re.Match, default_year: int) -> tuple:
    if match.re is NUMERIC_DATE_REGEX:
        return int(match.group(4)), int(match.group(1)), int(match.group(3))

    month = MONTHS[match.group(1).lower()]
    day = int(match.group(2))
    year = int(match.group(3)) if match.group(3) else default_year
    return year, month, day


def parse_deadline_date(line: str, today: date) -> Optional[date]:
    """
    Find and normalize the date mentioned in a line.

    Missing years default to ``today.year``. Returns None when there is no
    date, when the month/day combination does not exist, or when the year
    falls outside ``[today.year, today.year + 1]``.
    """
    match = find_date_string(line)
    if not match:
        return None

    year, month, day = _match_to_parts(match, today.year)
    try:
        parsed = date(year, month, day)
    except ValueError:
        return None

    if not today.year <= parsed.year <= today.year + 1:
        return None
    return parsed
