from .syllabus import (
    CourseInfo,
    Deadline,
    ParsedSyllabus,
    SyllabusResponse,
    ScheduleTask,
    ScheduleResponse,
)
from .todo import TodoCreate, TodoUpdate, TodoResponse

__all__ = [
    "CourseInfo", "Deadline", "ParsedSyllabus", "SyllabusResponse",
    "ScheduleTask", "ScheduleResponse",
    "TodoCreate", "TodoUpdate", "TodoResponse",
]
