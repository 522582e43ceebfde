"""
Heuristic syllabus text extraction.

Turns the raw text of an uploaded syllabus into a ParsedSyllabus:
course name, instructor, the schedule section, assignment-like lines and
dated deadlines. Every pass scans the same list of lines independently and
falls back to an empty value when nothing matches.
"""
import logging
import re
from datetime import date
from typing import List, Optional

from heybuddy.schemas.syllabus import CourseInfo, Deadline, ParsedSyllabus
from heybuddy.utils.date_parser import parse_deadline_date

logger = logging.getLogger(__name__)

COURSE_NAME_KEYWORDS = ["course", "class"]
INSTRUCTOR_KEYWORDS = ["instructor", "professor", "taught by"]

SCHEDULE_START_KEYWORDS = ["schedule", "course outline", "weekly topics", "course calendar"]
SCHEDULE_STOP_KEYWORDS = ["grading", "policies", "materials", "requirements"]

ASSIGNMENT_KEYWORDS = [
    "assignment", "homework", "project", "quiz", "exam",
    "paper", "presentation", "due", "submit", "deadline",
]

# Lines that start like a heading ("Week 3: ...", "Chapter 2 ...") are never tasks
HEADER_PREFIX_REGEX = re.compile(
    r"^(chapter|week|unit|module|page|reading|lecture)", re.IGNORECASE
)

MIN_ASSIGNMENT_LINE_LENGTH = 10


def split_lines(text: str) -> List[str]:
    """
    Split on line feeds only and drop a trailing carriage return. Form feeds
    and Unicode line separators stay inside their line.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _contains_any(line: str, keywords: List[str]) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in keywords)


def _find_labelled_value(lines: List[str], keywords: List[str]) -> Optional[str]:
    """First 'Label: value' line whose text mentions one of the keywords."""
    for line in lines:
        if ":" in line and _contains_any(line, keywords):
            return line.split(":", 1)[1].strip()
    return None


def find_course_name(lines: List[str]) -> Optional[str]:
    return _find_labelled_value(lines, COURSE_NAME_KEYWORDS)


def find_instructor(lines: List[str]) -> Optional[str]:
    return _find_labelled_value(lines, INSTRUCTOR_KEYWORDS)


def extract_schedule_section(lines: List[str]) -> str:
    """
    Capture the block between the first schedule header and the next
    grading/policies-style line. Both boundary lines are excluded and the
    scan stops for good at the first terminator.
    """
    in_schedule = False
    captured: List[str] = []

    for line in lines:
        if not in_schedule:
            if _contains_any(line, SCHEDULE_START_KEYWORDS):
                in_schedule = True
            continue

        if _contains_any(line, SCHEDULE_STOP_KEYWORDS):
            break

        stripped = line.strip()
        if stripped:
            captured.append(stripped)

    return "\n".join(captured)


def is_assignment_line(line: str) -> bool:
    """
    Substring keyword match, so 'examine' counts as 'exam'.
    """
    stripped = line.strip()
    if len(stripped) <= MIN_ASSIGNMENT_LINE_LENGTH:
        return False
    if HEADER_PREFIX_REGEX.match(stripped):
        return False
    return _contains_any(stripped, ASSIGNMENT_KEYWORDS)


def extract_assignments(lines: List[str]) -> List[str]:
    """Assignment-like lines as they appear in the document, untrimmed."""
    return [line for line in lines if is_assignment_line(line)]


def extract_deadlines(lines: List[str], today: date) -> List[Deadline]:
    """Assignment-like lines that carry a usable date, earliest first."""
    dated = []
    for line in lines:
        if not is_assignment_line(line):
            continue

        due = parse_deadline_date(line, today)
        if due is None:
            continue
        dated.append((due, line.strip()))

    # sorted() is stable: same-day deadlines keep document order
    dated = sorted(dated, key=lambda item: item[0])
    return [Deadline(task=task, date=due.isoformat()) for due, task in dated]


def extract_syllabus(text: str, filename: str, today: Optional[date] = None) -> ParsedSyllabus:
    """
    Main entry point: build a ParsedSyllabus from decoded document text.

    Args:
        text: Decoded syllabus text
        filename: Original upload filename, used when no course name is found
        today: Reference date for year inference; read once from the clock if omitted

    Returns:
        ParsedSyllabus with course info, assignment lines and sorted deadlines
    """
    if today is None:
        today = date.today()

    lines = split_lines(text)

    course_info = CourseInfo(
        name=find_course_name(lines) or filename,
        instructor=find_instructor(lines) or "",
        schedule=extract_schedule_section(lines),
    )
    parsed = ParsedSyllabus(
        course_info=course_info,
        assignments=extract_assignments(lines),
        deadlines=extract_deadlines(lines, today),
    )

    logger.debug(
        "Extracted %s: name=%r, %d assignments, %d deadlines, schedule=%d chars",
        filename,
        course_info.name,
        len(parsed.assignments),
        len(parsed.deadlines),
        len(course_info.schedule),
    )
    return parsed
