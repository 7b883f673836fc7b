"""
Exam catalog: read-by-code lookups and the one-time startup seed.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from models import ExamEntity, QuestionEntity
from schemas import Exam, ExamSummary, Question
from seed_data import DEFAULT_EXAM, DEFAULT_QUESTIONS

logger = logging.getLogger(__name__)


def to_exam(entity: ExamEntity) -> Exam:
    # The answer key (correct_index) is served alongside the options
    questions = [
        Question(
            id=q.id,
            section=q.section,
            text=q.text,
            options=list(q.options or []),
            correct_index=q.correct_index,
            marks=q.marks,
        )
        for q in sorted(entity.questions, key=lambda q: q.id)
    ]
    return Exam(
        code=entity.code,
        title=entity.title,
        description=entity.description,
        duration_minutes=entity.duration_minutes,
        passing_percentage=entity.passing_percentage,
        questions=questions,
    )


def find_exam_by_code(db: Session, code: str) -> Optional[Exam]:
    """Return the exam whose code matches case-insensitively, or None."""
    stmt = (
        select(ExamEntity)
        .options(selectinload(ExamEntity.questions))
        .where(func.lower(ExamEntity.code) == code.lower())
    )
    entity = db.execute(stmt).scalars().first()
    if entity is None:
        return None
    return to_exam(entity)


def list_exams(db: Session) -> List[ExamSummary]:
    counts = (
        select(QuestionEntity.exam_id, func.count(QuestionEntity.id).label("n"))
        .group_by(QuestionEntity.exam_id)
        .subquery()
    )
    stmt = (
        select(ExamEntity, func.coalesce(counts.c.n, 0))
        .outerjoin(counts, counts.c.exam_id == ExamEntity.id)
        .order_by(ExamEntity.code)
    )
    return [
        ExamSummary(
            code=e.code,
            title=e.title,
            description=e.description,
            duration_minutes=e.duration_minutes,
            passing_percentage=e.passing_percentage,
            total_questions=n,
        )
        for e, n in db.execute(stmt).all()
    ]


def seed_default_exam(db: Session) -> bool:
    """
    Insert the default exam if the catalog is empty.

    Returns True when the exam was inserted, False when any exam already
    existed and nothing was written.
    """
    if db.execute(select(ExamEntity.id).limit(1)).first() is not None:
        logger.info("Catalog already populated, skipping seed")
        return False

    exam = ExamEntity(**DEFAULT_EXAM)
    exam.questions = [
        QuestionEntity(
            id=number,
            section=section,
            text=text,
            options=list(options),
            correct_index=correct_index,
            marks=1,
        )
        for number, (section, text, options, correct_index) in enumerate(DEFAULT_QUESTIONS, start=1)
    ]
    try:
        db.add(exam)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Seeded exam %s with %d questions", exam.code, len(exam.questions))
    return True
