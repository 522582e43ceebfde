from sqlalchemy import Column, Integer, String, DateTime, Text, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from heybuddy.database import Base


class Syllabus(Base):
    """Uploaded syllabus: raw text, original filename and its parsed structure."""
    __tablename__ = "syllabi"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    filename = Column(String, nullable=False)
    content = Column(Text, nullable=False)  # Decoded document text
    parsed_content = Column(JSON, nullable=False)  # ParsedSyllabus, stored verbatim
    uploaded_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    todos = relationship("Todo", back_populates="syllabus", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Syllabus(id={self.id}, filename='{self.filename}', user_id={self.user_id})>"
