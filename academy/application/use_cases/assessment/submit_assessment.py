"""
평가 제출 Use Case — 도메인/포트만 사용 (Django/redis 미사용)

gate → (채점) → 저장.
- 마감/중복은 Err 값으로 반환 (예외 아님)
- 저장소 유니크 제약 위반은 "already submitted today"와 동일하게 취급
- 설정 오류(정답 길이 불일치 등)는 예외 그대로 전파
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

from academy.application.ports.assessment import (
    DuplicateSubmissionError,
    SubmissionLockPort,
)
from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.assessment.categories import AssessmentCategory, target_key_for
from academy.domain.assessment.clock import DEFAULT_CLOCK, HomeworkClock
from academy.domain.assessment.entities import NO_ANSWER, GradedResult, SubmissionAttempt
from academy.domain.assessment.errors import AnswerKeyNotFoundError
from academy.domain.assessment.gate import (
    REASON_ALREADY_SUBMITTED,
    REASON_MESSAGES,
    GateDecision,
    can_submit,
)
from academy.domain.assessment.grader import grade
from academy.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitOutcome:
    attempt: SubmissionAttempt
    decision: GateDecision
    result: Optional[GradedResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attempt_id": self.attempt.id,
            "category": self.attempt.category.value,
            "target_id": self.attempt.target_id,
            "logical_date": self.attempt.logical_date.isoformat(),
            "deadline_display": self.decision.deadline_display,
            "result": self.result.to_dict() if self.result is not None else None,
        }


class _NoLock:
    def acquire(self, key: str) -> bool:
        return True

    def release(self, key: str) -> None:
        return None


def submission_lock_key(
    student_id: int,
    category: AssessmentCategory,
    target_key: str,
    logical_date,
) -> str:
    return f"assessment:submit:{student_id}:{category.value}:{target_key}:{logical_date.isoformat()}"


def _already_submitted() -> Err:
    return Err(
        message=REASON_MESSAGES[REASON_ALREADY_SUBMITTED],
        code=REASON_ALREADY_SUBMITTED,
    )


def check_submission(
    uow: UnitOfWork,
    *,
    student_id: int,
    category,
    target_id=None,
    now: Optional[datetime] = None,
    clock: HomeworkClock = DEFAULT_CLOCK,
) -> GateDecision:
    """읽기 전용 gate 판단 (화면 표시용)."""
    if now is None:
        now = datetime.now(timezone.utc)
    return can_submit(
        student_id=student_id,
        category=category,
        now=now,
        attempt_exists=uow.attempts.exists,
        target_id=target_id,
        clock=clock,
    )


def submit_assessment(
    uow: UnitOfWork,
    *,
    student_id: int,
    category,
    answers: Sequence[int] = (),
    target_id=None,
    now: Optional[datetime] = None,
    clock: HomeworkClock = DEFAULT_CLOCK,
    lock: Optional[SubmissionLockPort] = None,
) -> Result:
    """
    Ok(SubmitOutcome) | Err(message, code=reason)

    Raises:
        AssessmentConfigError: 카테고리/정답/답안 길이 등 연동 오류
        AnswerKeyNotFoundError: target에 해당하는 정답 없음
    """
    if now is None:
        now = datetime.now(timezone.utc)
    category = AssessmentCategory.parse(category)
    lock = lock or _NoLock()
    target = str(target_id) if target_id is not None else None
    answers = tuple(int(a) if a is not None else NO_ANSWER for a in answers)

    decision = check_submission(
        uow,
        student_id=student_id,
        category=category,
        target_id=target,
        now=now,
        clock=clock,
    )
    if not decision.allowed:
        logger.info(
            "SUBMIT_REJECTED student=%s category=%s date=%s reason=%s",
            student_id, category.value, decision.logical_date, decision.reason,
        )
        return Err(message=decision.message, code=decision.reason)

    result: Optional[GradedResult] = None
    answer_key_id: Optional[int] = None
    if category.spec.is_graded:
        key = uow.answer_keys.get(category, target)
        if key is None:
            raise AnswerKeyNotFoundError(
                f"answer key not found: {category.value}/{target}"
            )
        answer_key_id = uow.answer_keys.get_id(category, target)
        result = grade(answers, key)

    target_key = target_key_for(category, target)
    lock_key = submission_lock_key(student_id, category, target_key, decision.logical_date)
    if not lock.acquire(lock_key):
        logger.info("SUBMIT_LOCKED key=%s", lock_key)
        return _already_submitted()

    attempt = SubmissionAttempt(
        student_id=int(student_id),
        category=category,
        target_id=target,
        answers=answers,
        submitted_at=now,
        logical_date=decision.logical_date,
        score=result.score if result else None,
        correct_count=result.correct_count if result else None,
        question_count=result.question_count if result else None,
        details=[d.to_dict() for d in result.details] if result else [],
    )

    try:
        with uow:
            saved = uow.attempts.create(attempt, result, answer_key_id=answer_key_id)
    except DuplicateSubmissionError:
        logger.info(
            "SUBMIT_DUPLICATE student=%s category=%s date=%s",
            student_id, category.value, decision.logical_date,
        )
        return _already_submitted()
    finally:
        lock.release(lock_key)

    logger.info(
        "SUBMIT_OK attempt=%s student=%s category=%s date=%s score=%s",
        saved.id, student_id, category.value, decision.logical_date,
        result.score if result else None,
    )
    return Ok(SubmitOutcome(attempt=saved, decision=decision, result=result))
