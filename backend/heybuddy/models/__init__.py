from .syllabus import Syllabus
from .todo import Todo

__all__ = ["Syllabus", "Todo"]
