from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from errors import Unauthorized
from evaluator import evaluate
from ledger import append_result, is_admin_key, list_results
from models import ExamResultEntity
from schemas import Submission
from settings import settings

ADMIN_KEY = settings.ADMIN_KEY
T0 = datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


def store(db, exam, name, answers, at):
    result = evaluate(exam, Submission(student_name=name, answers=answers), now=at)
    append_result(db, result)
    return result


def test_lists_newest_first(db, two_question_exam):
    store(db, two_question_exam, "second", {1: 2}, T0 + timedelta(minutes=5))
    store(db, two_question_exam, "first", {}, T0)
    store(db, two_question_exam, "third", {1: 2, 2: 0}, T0 + timedelta(minutes=10))

    results = list_results(db, "DEMO-1", ADMIN_KEY, ADMIN_KEY)

    assert [r.student_name for r in results] == ["third", "second", "first"]
    assert [r.score for r in results] == [2, 1, 0]
    assert results[0].submitted_at_utc == T0 + timedelta(minutes=10)


def test_code_match_is_case_insensitive_and_scoped(db, two_question_exam):
    store(db, two_question_exam, "a", {}, T0)
    other = two_question_exam.model_copy(update={"code": "OTHER-9"})
    store(db, other, "b", {}, T0)

    assert [r.student_name for r in list_results(db, "demo-1", ADMIN_KEY, ADMIN_KEY)] == ["a"]


def test_duplicate_results_are_both_kept(db, two_question_exam):
    store(db, two_question_exam, "same", {1: 2}, T0)
    store(db, two_question_exam, "same", {1: 2}, T0)

    assert db.execute(select(func.count(ExamResultEntity.id))).scalar() == 2
    assert len(list_results(db, "DEMO-1", ADMIN_KEY, ADMIN_KEY)) == 2


def test_stored_result_round_trips_unchanged(db, two_question_exam):
    stored = store(db, two_question_exam, "Asha", {1: 2}, T0)

    [listed] = list_results(db, "DEMO-1", ADMIN_KEY, ADMIN_KEY)
    assert listed == stored


def test_wrong_key_is_rejected_before_reading(db, two_question_exam):
    store(db, two_question_exam, "a", {}, T0)

    with pytest.raises(Unauthorized):
        list_results(db, "DEMO-1", "wrong", ADMIN_KEY)
    with pytest.raises(Unauthorized):
        list_results(db, "NO-SUCH-EXAM", "wrong", ADMIN_KEY)
    with pytest.raises(Unauthorized):
        list_results(db, "DEMO-1", "", ADMIN_KEY)


def test_is_admin_key():
    assert is_admin_key("secret", "secret")
    assert not is_admin_key("Secret", "secret")
    assert not is_admin_key(None, "secret")
    assert not is_admin_key("sécret", "secret")
