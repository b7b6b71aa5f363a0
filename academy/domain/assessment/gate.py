"""
일일 제출 게이트 — 읽기 전용 판단

1) 숙제 날짜 계산
2) 마감 체크 (계산-비교 사이 시계 오차 방어)
3) 같은 (학생, 카테고리, [퀘스트/시험 id], 숙제 날짜) 제출 존재 여부
4) 통과 시 숙제 날짜 + 마감 표기 반환

❗ 이 판단은 UX/최적화 계층이다.
동시 제출(더블클릭/두 탭) 정합성은 저장소의 유니크 제약이 최종 책임진다.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional

from academy.domain.assessment.categories import AssessmentCategory, target_key_for
from academy.domain.assessment.clock import DEFAULT_CLOCK, HomeworkClock
from academy.domain.assessment.errors import TargetRequiredError

REASON_DEADLINE_PASSED = "deadline passed"
REASON_ALREADY_SUBMITTED = "already submitted today"

REASON_MESSAGES = {
    REASON_DEADLINE_PASSED: "오늘 숙제 마감 시간이 지났습니다.",
    REASON_ALREADY_SUBMITTED: "오늘 이미 제출하셨습니다. 내일 다시 제출해주세요.",
}

# (student_id, category, target_key, logical_date) -> 제출 존재 여부
AttemptExists = Callable[[int, AssessmentCategory, str, date], bool]


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    logical_date: date
    deadline: datetime
    deadline_display: str
    reason: Optional[str] = None

    @property
    def message(self) -> str:
        return REASON_MESSAGES.get(self.reason, "") if self.reason else ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allowed": self.allowed,
            "reason": self.reason,
            "message": self.message,
            "logical_date": self.logical_date.isoformat(),
            "deadline": self.deadline.isoformat(),
            "deadline_display": self.deadline_display,
        }


def can_submit(
    *,
    student_id: int,
    category,
    now: datetime,
    attempt_exists: AttemptExists,
    target_id=None,
    clock: HomeworkClock = DEFAULT_CLOCK,
) -> GateDecision:
    category = AssessmentCategory.parse(category)

    if category.spec.requires_target and not target_id:
        raise TargetRequiredError(f"target_id required for {category.value}")

    logical = clock.logical_date(now)
    deadline_at = clock.deadline(logical)
    display = clock.format_deadline(logical, now)

    def _reject(reason: str) -> GateDecision:
        return GateDecision(
            allowed=False,
            reason=reason,
            logical_date=logical,
            deadline=deadline_at,
            deadline_display=display,
        )

    if not clock.is_before_deadline(logical, now):
        return _reject(REASON_DEADLINE_PASSED)

    target_key = target_key_for(category, target_id)
    if attempt_exists(int(student_id), category, target_key, logical):
        return _reject(REASON_ALREADY_SUBMITTED)

    return GateDecision(
        allowed=True,
        logical_date=logical,
        deadline=deadline_at,
        deadline_display=display,
    )
