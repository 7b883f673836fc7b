"""
Submission evaluator.

Scores a submission against an exam's answer key. No I/O: the caller
persists the returned result.
"""

from datetime import datetime, timezone
from typing import Optional

from schemas import Exam, ExamResult, Submission


def percentage_of(score: int, total: int) -> float:
    """score / total * 100 rounded to 2 decimals; 0 when there is nothing to score."""
    if total == 0:
        return 0.0
    return round(score * 100 / total, 2)


def evaluate(exam: Exam, submission: Submission, now: Optional[datetime] = None) -> ExamResult:
    """
    Score one attempt.

    Each question answered with its correct index earns its marks.
    Unanswered questions, answers for ids the exam does not contain and
    out-of-range indices earn nothing and are not errors. The student name
    is not checked here.
    """
    total = sum(q.marks for q in exam.questions)
    score = 0
    for q in exam.questions:
        selected = submission.answers.get(q.id)
        if selected is not None and selected == q.correct_index:
            score += q.marks

    percentage = percentage_of(score, total)
    return ExamResult(
        exam_code=exam.code,
        student_name=submission.student_name,
        email=submission.email,
        college=submission.college,
        score=score,
        total_marks=total,
        percentage=percentage,
        passed=percentage >= exam.passing_percentage,
        submitted_at_utc=now or datetime.now(timezone.utc),
    )
