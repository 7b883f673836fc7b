"""
Relational tables for exams, questions and scored results.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from database import Base


class ExamEntity(Base):
    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, index=True)
    # Public-facing exam identifier (e.g. "INT-2025-001")
    code = Column(String(50), unique=True, nullable=False, index=True)
    title = Column(String(200), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    duration_minutes = Column(Integer, nullable=False, default=0)
    passing_percentage = Column(Integer, nullable=False, default=0)

    questions = relationship(
        "QuestionEntity",
        back_populates="exam",
        order_by="QuestionEntity.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<ExamEntity {self.code}>"


class QuestionEntity(Base):
    __tablename__ = "questions"

    # Unique across the whole catalog, used as the answer-key lookup key
    id = Column(Integer, primary_key=True)
    exam_id = Column(Integer, ForeignKey("exams.id", ondelete="CASCADE"), nullable=False, index=True)
    section = Column(String(100), nullable=False, default="")
    text = Column(Text, nullable=False)
    options = Column(JSON, nullable=False, default=list)  # serialized list of option strings
    correct_index = Column(Integer, nullable=False)
    marks = Column(Integer, nullable=False, default=1)

    exam = relationship("ExamEntity", back_populates="questions")

    def __repr__(self):
        return f"<QuestionEntity {self.id} ({self.section})>"


class ExamResultEntity(Base):
    """One scored attempt. Rows are inserted once and never updated."""
    __tablename__ = "exam_results"

    id = Column(Integer, primary_key=True)
    exam_code = Column(String(50), nullable=False, index=True)
    student_name = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False, default="")
    college = Column(String(200), nullable=False, default="")
    score = Column(Integer, nullable=False)
    total_marks = Column(Integer, nullable=False)
    percentage = Column(Float, nullable=False)
    passed = Column(Boolean, nullable=False)
    # Naive UTC
    submitted_at_utc = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<ExamResultEntity {self.exam_code} {self.student_name} {self.score}/{self.total_marks}>"
