"""
Result ledger: append-only store of scored attempts.
"""

import hmac
import logging
from datetime import timezone
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import StoreError, Unauthorized
from models import ExamResultEntity
from schemas import ExamResult

logger = logging.getLogger(__name__)


def _to_row(result: ExamResult) -> ExamResultEntity:
    submitted = result.submitted_at_utc
    if submitted.tzinfo is not None:
        submitted = submitted.astimezone(timezone.utc).replace(tzinfo=None)
    return ExamResultEntity(
        exam_code=result.exam_code,
        student_name=result.student_name,
        email=result.email,
        college=result.college,
        score=result.score,
        total_marks=result.total_marks,
        percentage=result.percentage,
        passed=result.passed,
        submitted_at_utc=submitted,
    )


def _from_row(row: ExamResultEntity) -> ExamResult:
    return ExamResult(
        exam_code=row.exam_code,
        student_name=row.student_name,
        email=row.email,
        college=row.college,
        score=row.score,
        total_marks=row.total_marks,
        percentage=row.percentage,
        passed=row.passed,
        submitted_at_utc=row.submitted_at_utc.replace(tzinfo=timezone.utc),
    )


def append_result(db: Session, result: ExamResult) -> None:
    """Store one result in its own transaction. Identical results are stored again."""
    try:
        db.add(_to_row(result))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Could not store result for exam %s", result.exam_code)
        raise StoreError() from e


def is_admin_key(key: str, admin_key: str) -> bool:
    return hmac.compare_digest((key or "").encode("utf-8"), admin_key.encode("utf-8"))


def list_results(db: Session, code: str, key: str, admin_key: str) -> List[ExamResult]:
    """
    All results for an exam code (case-insensitive), most recent first.

    Raises Unauthorized before touching the store when key does not match
    admin_key, so a caller without the key learns nothing about the code.
    """
    if not is_admin_key(key, admin_key):
        logger.warning("Rejected attempts listing: bad admin key")
        raise Unauthorized()

    stmt = (
        select(ExamResultEntity)
        .where(func.lower(ExamResultEntity.exam_code) == code.lower())
        .order_by(ExamResultEntity.submitted_at_utc.desc(), ExamResultEntity.id.desc())
    )
    try:
        rows = db.execute(stmt).scalars().all()
    except SQLAlchemyError as e:
        logger.exception("Could not list results for exam %s", code)
        raise StoreError() from e
    return [_from_row(r) for r in rows]
