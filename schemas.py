"""
API Schemas for the Exam Portal

Each Pydantic model is a shape served to or accepted from a client. Field
names are snake_case in Python and camelCase on the wire
(e.g., passing_percentage -> "passingPercentage").
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Question(ApiModel):
    """Multiple-choice question of an exam, including its answer key"""
    id: int = Field(..., description="Catalog-wide question identity")
    section: str = Field("", description="Free-text grouping, e.g., SQL")
    text: str = Field(..., description="Question prompt text")
    options: List[str] = Field(..., min_length=1, description="Answer options in display order")
    correct_index: int = Field(..., ge=0, description="Index of the correct option in options list")
    marks: int = Field(1, ge=0, description="Marks awarded for a correct answer")

    @model_validator(mode="after")
    def _correct_index_in_range(self):
        if self.correct_index >= len(self.options):
            raise ValueError("correct_index must point into options")
        return self


class Exam(ApiModel):
    """Exam definition with its ordered question set"""
    code: str = Field(..., description="Human-readable exam code, e.g., INT-2025-001")
    title: str = Field(..., description="Exam title")
    description: str = Field("", description="Short description of the exam")
    duration_minutes: int = Field(60, ge=0, description="Suggested duration in minutes (not enforced)")
    total_questions: int = Field(0, description="Number of questions in the exam")
    passing_percentage: int = Field(..., ge=0, le=100, description="Minimum percentage needed to pass")
    questions: List[Question] = Field(default_factory=list)

    @model_validator(mode="after")
    def _count_questions(self):
        self.total_questions = len(self.questions)
        return self


class ExamSummary(ApiModel):
    """Exam metadata without its questions"""
    code: str
    title: str
    description: str = ""
    duration_minutes: int = 0
    passing_percentage: int = 0
    total_questions: int = 0


class Submission(ApiModel):
    """A student's attempt at an exam, as posted by the client"""
    student_name: str = Field("", description="Name of the test taker")
    email: str = Field("", description="Contact email, free text")
    college: str = Field("", description="Institution, free text")
    answers: Dict[int, int] = Field(default_factory=dict, description="Question id -> selected option index")

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data):
        if not isinstance(data, dict):
            return data
        known = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            known[name.lower()] = alias
            known[alias.lower()] = alias
        return {known.get(str(key).lower(), key): value for key, value in data.items()}

    @field_validator("email", "college", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("answers", mode="before")
    @classmethod
    def _none_as_no_answers(cls, value):
        return {} if value is None else value


class ExamResult(ApiModel):
    """Scored outcome of one submission. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    exam_code: str
    student_name: str
    email: str = ""
    college: str = ""
    score: int = Field(..., ge=0)
    total_marks: int = Field(..., ge=0)
    percentage: float = Field(..., ge=0, le=100)
    passed: bool
    submitted_at_utc: datetime

    @model_validator(mode="after")
    def _score_within_total(self):
        if self.score > self.total_marks:
            raise ValueError("score cannot exceed total_marks")
        return self
