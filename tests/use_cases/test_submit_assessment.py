"""gate → 채점 → 저장 Use Case (in-memory 포트)."""
from __future__ import annotations

from datetime import date

import pytest

from academy.application.use_cases.assessment.submit_assessment import (
    check_submission,
    submission_lock_key,
    submit_assessment,
)
from academy.domain.assessment.categories import AssessmentCategory
from academy.domain.assessment.entities import AnswerKey
from academy.domain.assessment.errors import (
    AnswerKeyNotFoundError,
    AnswerLengthMismatchError,
    TargetRequiredError,
)
from academy.domain.assessment.gate import REASON_ALREADY_SUBMITTED
from tests.fakes import RecordingLock, kst

LISTENING_KEY = AnswerKey.build(category="listening", answers=[2] * 17)


@pytest.fixture
def seeded(uow):
    uow.answer_keys.add(LISTENING_KEY, key_id=11)
    return uow


def test_accepted_submission_is_graded_and_stored(seeded) -> None:
    outcome = submit_assessment(
        seeded,
        student_id=7,
        category="listening",
        answers=[2] * 16 + [0],
        now=kst(2024, 3, 15, 22),
    )

    assert outcome.ok
    saved = outcome.value
    assert saved.attempt.id == 1
    assert saved.attempt.logical_date == date(2024, 3, 15)
    assert saved.result.score == 94
    assert saved.attempt.score == 94
    assert saved.attempt.details[16]["is_correct"] is False
    assert seeded.committed == 1

    data = saved.to_dict()
    assert data["result"]["correct_count"] == 16
    assert data["deadline_display"] == "내일 새벽 3시"


def test_second_submission_same_day_rejected(seeded) -> None:
    submit_assessment(seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 15, 22))
    again = submit_assessment(seeded, student_id=7, category="listening", answers=[1] * 17, now=kst(2024, 3, 16, 2))

    assert not again.ok
    assert again.code == REASON_ALREADY_SUBMITTED
    assert len(seeded.attempts.rows) == 1


def test_next_logical_day_accepted(seeded) -> None:
    submit_assessment(seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 15, 22))
    nxt = submit_assessment(seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 16, 3))
    assert nxt.ok
    assert nxt.value.attempt.logical_date == date(2024, 3, 16)


def test_store_uniqueness_wins_race(seeded, monkeypatch) -> None:
    # gate 통과 직후 다른 요청이 먼저 insert 한 상황
    monkeypatch.setattr(seeded.attempts, "exists", lambda *a: False)
    submit_assessment(seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 15, 22))

    lock = RecordingLock()
    again = submit_assessment(
        seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 15, 23), lock=lock,
    )
    assert again.code == REASON_ALREADY_SUBMITTED
    assert lock.released == lock.acquired


def test_lock_not_acquired_rejects(seeded) -> None:
    lock = RecordingLock(grant=False)
    outcome = submit_assessment(
        seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 15, 22), lock=lock,
    )
    assert outcome.code == REASON_ALREADY_SUBMITTED
    assert seeded.attempts.rows == {}


def test_lock_key_and_release(seeded, lock) -> None:
    submit_assessment(
        seeded, student_id=7, category="listening", answers=[2] * 17, now=kst(2024, 3, 15, 22), lock=lock,
    )
    expected = submission_lock_key(7, AssessmentCategory.LISTENING, "", date(2024, 3, 15))
    assert lock.acquired == [expected]
    assert lock.released == [expected]
    assert expected == "assessment:submit:7:listening::2024-03-15"


def test_missing_answer_key_raises(uow) -> None:
    with pytest.raises(AnswerKeyNotFoundError):
        submit_assessment(uow, student_id=7, category="easy", answers=[1] * 10, now=kst(2024, 3, 15))


def test_length_mismatch_propagates_without_saving(seeded) -> None:
    with pytest.raises(AnswerLengthMismatchError):
        submit_assessment(seeded, student_id=7, category="listening", answers=[2] * 10, now=kst(2024, 3, 15))
    assert seeded.attempts.rows == {}


def test_vocab_quests_are_independent(uow) -> None:
    now = kst(2024, 3, 15, 20)
    first = submit_assessment(uow, student_id=7, category="vocab", target_id="quest-1", now=now)
    other = submit_assessment(uow, student_id=7, category="vocab", target_id="quest-2", now=now)
    again = submit_assessment(uow, student_id=7, category="vocab", target_id="quest-1", now=now)

    assert first.ok and other.ok
    assert first.value.result is None
    assert first.value.attempt.score is None
    assert again.code == REASON_ALREADY_SUBMITTED


def test_vocab_without_target_raises(uow) -> None:
    with pytest.raises(TargetRequiredError):
        submit_assessment(uow, student_id=7, category="vocab", now=kst(2024, 3, 15))


def test_check_submission_reads_only(seeded) -> None:
    decision = check_submission(seeded, student_id=7, category="listening", now=kst(2024, 3, 15, 22))
    assert decision.allowed is True
    assert seeded.attempts.rows == {}



def test_different_mock_exams_same_day_accepted(uow) -> None:
    for key_id, exam in ((21, "exam-1"), (22, "exam-2")):
        key = AnswerKey.build(
            category="mock_exam", answers=[3] * 45, weighted_indices=range(35, 45), target_id=exam,
        )
        uow.answer_keys.add(key, key_id=key_id)

    first = submit_assessment(
        uow, student_id=7, category="mock_exam", target_id="exam-1", answers=[3] * 45, now=kst(2024, 3, 15, 14),
    )
    second = submit_assessment(
        uow, student_id=7, category="mock_exam", target_id="exam-2", answers=[3] * 45, now=kst(2024, 3, 15, 20),
    )
    again = submit_assessment(
        uow, student_id=7, category="mock_exam", target_id="exam-1", answers=[3] * 45, now=kst(2024, 3, 15, 23),
    )

    assert first.ok and second.ok
    assert second.value.result.score == 100
    assert again.code == REASON_ALREADY_SUBMITTED
    assert len(uow.attempts.rows) == 2
