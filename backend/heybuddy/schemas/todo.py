from datetime import datetime

from pydantic import Field

from heybuddy.schemas.syllabus import CamelModel


class TodoCreate(CamelModel):
    syllabus_id: int
    task: str = Field(min_length=1)
    due_date: datetime
    completed: bool = False


class TodoUpdate(CamelModel):
    completed: bool


class TodoResponse(CamelModel):
    id: int
    user_id: int
    syllabus_id: int
    task: str
    due_date: datetime
    completed: bool
