"""일일 제출 게이트."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from academy.domain.assessment.categories import AssessmentCategory
from academy.domain.assessment.clock import HomeworkClock
from academy.domain.assessment.errors import TargetRequiredError
from academy.domain.assessment.gate import (
    REASON_ALREADY_SUBMITTED,
    REASON_DEADLINE_PASSED,
    REASON_MESSAGES,
    can_submit,
)
from tests.fakes import kst


class AttemptStore:
    def __init__(self) -> None:
        self.rows = set()
        self.calls = []

    def __call__(self, student_id, category, target_key, logical_date) -> bool:
        self.calls.append((student_id, category, target_key, logical_date))
        return (student_id, category, target_key, logical_date) in self.rows


@dataclass(frozen=True)
class StaleClock(HomeworkClock):
    """계산-비교 사이에 날짜가 넘어간 상황 재현."""
    stale_date: date = date(2024, 3, 1)

    def logical_date(self, timestamp):
        return self.stale_date


def test_first_submission_allowed() -> None:
    decision = can_submit(
        student_id=1,
        category="listening",
        now=kst(2024, 3, 15, 21),
        attempt_exists=AttemptStore(),
    )
    assert decision.allowed is True
    assert decision.reason is None
    assert decision.logical_date == date(2024, 3, 15)
    assert decision.deadline_display == "내일 새벽 3시"


def test_second_submission_same_logical_day_rejected() -> None:
    store = AttemptStore()
    first = can_submit(student_id=1, category="listening", now=kst(2024, 3, 15, 21), attempt_exists=store)
    store.rows.add((1, AssessmentCategory.LISTENING, "", first.logical_date))

    # 새벽 1시 = 아직 같은 숙제 날짜
    second = can_submit(student_id=1, category="listening", now=kst(2024, 3, 16, 1), attempt_exists=store)
    assert second.allowed is False
    assert second.reason == REASON_ALREADY_SUBMITTED
    assert second.message == REASON_MESSAGES[REASON_ALREADY_SUBMITTED]


def test_after_cutover_is_new_day() -> None:
    store = AttemptStore()
    store.rows.add((1, AssessmentCategory.LISTENING, "", date(2024, 3, 15)))
    decision = can_submit(student_id=1, category="listening", now=kst(2024, 3, 16, 3), attempt_exists=store)
    assert decision.allowed is True
    assert decision.logical_date == date(2024, 3, 16)


def test_other_student_and_category_independent() -> None:
    store = AttemptStore()
    store.rows.add((1, AssessmentCategory.LISTENING, "", date(2024, 3, 15)))
    now = kst(2024, 3, 15, 21)
    assert can_submit(student_id=2, category="listening", now=now, attempt_exists=store).allowed
    assert can_submit(student_id=1, category="easy", now=now, attempt_exists=store).allowed


def test_deadline_passed_when_day_rolled_over() -> None:
    decision = can_submit(
        student_id=1,
        category="easy",
        now=kst(2024, 3, 15, 12),
        attempt_exists=AttemptStore(),
        clock=StaleClock(),
    )
    assert decision.allowed is False
    assert decision.reason == REASON_DEADLINE_PASSED
    assert decision.message == REASON_MESSAGES[REASON_DEADLINE_PASSED]


def test_deadline_checked_before_existence() -> None:
    store = AttemptStore()
    can_submit(student_id=1, category="easy", now=kst(2024, 3, 15), attempt_exists=store, clock=StaleClock())
    assert store.calls == []


def test_vocab_keyed_by_target() -> None:
    store = AttemptStore()
    store.rows.add((1, AssessmentCategory.VOCAB, "quest-1", date(2024, 3, 15)))
    now = kst(2024, 3, 15, 20)

    same = can_submit(student_id=1, category="vocab", target_id="quest-1", now=now, attempt_exists=store)
    other = can_submit(student_id=1, category="vocab", target_id="quest-2", now=now, attempt_exists=store)
    assert same.reason == REASON_ALREADY_SUBMITTED
    assert other.allowed is True


def test_vocab_requires_target() -> None:
    with pytest.raises(TargetRequiredError):
        can_submit(student_id=1, category="vocab", now=kst(2024, 3, 15), attempt_exists=AttemptStore())


def test_non_target_category_ignores_target_id() -> None:
    store = AttemptStore()
    can_submit(student_id=1, category="listening", target_id="set-9", now=kst(2024, 3, 15), attempt_exists=store)
    assert store.calls[0][2] == ""


def test_to_dict_shape() -> None:
    data = can_submit(
        student_id=1, category="mock_exam", now=kst(2024, 3, 15), attempt_exists=AttemptStore()
    ).to_dict()
    assert data["allowed"] is True
    assert data["logical_date"] == "2024-03-15"
    assert data["deadline"] == "2024-03-16T03:00:00+09:00"
