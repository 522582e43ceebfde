from datetime import datetime
from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire and in stored JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CourseInfo(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    instructor: str = ""
    schedule: str = ""


class Deadline(CamelModel):
    model_config = ConfigDict(frozen=True)

    task: str
    date: str  # ISO YYYY-MM-DD


class ParsedSyllabus(CamelModel):
    model_config = ConfigDict(frozen=True)

    course_info: CourseInfo
    # Tuples, so the contents cannot be mutated in place
    assignments: Tuple[str, ...] = ()
    deadlines: Tuple[Deadline, ...] = ()


class SyllabusResponse(CamelModel):
    id: int
    user_id: int
    filename: str
    parsed_content: ParsedSyllabus
    uploaded_at: datetime


Priority = Literal["high", "medium", "low"]


class ScheduleTask(CamelModel):
    task: str
    due_date: str
    priority: Priority


class ScheduleResponse(CamelModel):
    syllabus_id: int
    tasks: List[ScheduleTask]
