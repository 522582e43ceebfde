"""
Study schedule built from a syllabus' stored deadlines.

Deadlines already passed are dropped and the rest are ranked by how soon
they are due.
"""
import logging
from datetime import date
from typing import List, Optional

from heybuddy.schemas.syllabus import ParsedSyllabus, ScheduleTask

logger = logging.getLogger(__name__)

HIGH_PRIORITY_DAYS = 7
MEDIUM_PRIORITY_DAYS = 14


def classify_priority(due: date, today: date) -> str:
    days_until_due = (due - today).days
    if days_until_due <= HIGH_PRIORITY_DAYS:
        return "high"
    if days_until_due <= MEDIUM_PRIORITY_DAYS:
        return "medium"
    return "low"


def build_schedule(parsed: ParsedSyllabus, today: Optional[date] = None) -> List[ScheduleTask]:
    """
    One task per upcoming deadline, earliest first.

    Deadlines with an unreadable date or a date before ``today`` are skipped.
    A deadline due today is still on the schedule.
    """
    if today is None:
        today = date.today()

    upcoming = []
    for deadline in parsed.deadlines:
        try:
            due = date.fromisoformat(deadline.date)
        except ValueError:
            logger.warning("Skipping deadline with unreadable date: %r", deadline.date)
            continue

        if due < today:
            continue
        upcoming.append((due, deadline.task))

    upcoming.sort(key=lambda item: item[0])

    return [
        ScheduleTask(task=task, due_date=due.isoformat(), priority=classify_priority(due, today))
        for due, task in upcoming
    ]
