from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from heybuddy.database import Base


class Todo(Base):
    """A to-do item tied to one syllabus."""
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    syllabus_id = Column(Integer, ForeignKey("syllabi.id"), nullable=False)
    task = Column(String, nullable=False)
    due_date = Column(DateTime, nullable=False)
    completed = Column(Boolean, default=False)

    syllabus = relationship("Syllabus", back_populates="todos")

    def __repr__(self):
        return f"<Todo(id={self.id}, task='{self.task}', completed={self.completed})>"
