"""
평가 도메인 엔티티 — 순수 파이썬 (Django/ORM 미사용)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Tuple

from academy.domain.assessment.categories import AssessmentCategory, ScoringRule
from academy.domain.assessment.errors import (
    InvalidAnswerKeyError,
    MissingWeightConfigError,
    WeightTotalError,
)

# 미응답 표시. 유효 선택지(1~5)와 절대 겹치지 않는다.
NO_ANSWER = 0


@dataclass(frozen=True)
class AnswerKey:
    """
    정답 정의.

    weighted_indices: 3점 문항의 0-based 인덱스 (모의고사 전용).
    배점형이 아닌 카테고리는 None.
    """
    category: AssessmentCategory
    answers: Tuple[int, ...]
    weighted_indices: Optional[FrozenSet[int]] = None
    target_id: Optional[str] = None

    @classmethod
    def build(
        cls,
        *,
        category,
        answers: Sequence[int],
        weighted_indices: Optional[Sequence[int]] = None,
        target_id=None,
    ) -> "AnswerKey":
        category = AssessmentCategory.parse(category)
        return cls(
            category=category,
            answers=tuple(int(a) for a in answers),
            weighted_indices=(
                frozenset(int(i) for i in weighted_indices)
                if weighted_indices is not None
                else None
            ),
            target_id=(str(target_id) if target_id is not None else None),
        )

    @property
    def question_count(self) -> int:
        return len(self.answers)

    def points_for(self, index: int) -> int:
        spec = self.category.spec
        if spec.scoring_rule is not ScoringRule.WEIGHTED:
            return 1
        if self.weighted_indices is None:
            raise MissingWeightConfigError(
                f"weight configuration missing for {self.category.value}"
            )
        return spec.weighted_points if index in self.weighted_indices else spec.base_points

    def max_score(self) -> int:
        spec = self.category.spec
        if spec.scoring_rule is ScoringRule.WEIGHTED:
            return sum(self.points_for(i) for i in range(self.question_count))
        return 100

    def validate(self) -> "AnswerKey":
        """
        정답 생성/수정 시점 검증 (채점기는 이 검증을 신뢰한다).

        - 길이 == 카테고리 고정 문항 수
        - 각 정답이 선택지 범위 안
        - 배점형: 배점 설정 필수, 인덱스 범위, 합계 == 100
        """
        spec = self.category.spec
        if not spec.is_graded:
            raise InvalidAnswerKeyError(
                f"{self.category.value} is not a graded category"
            )

        if len(self.answers) != spec.question_count:
            raise InvalidAnswerKeyError(
                f"{self.category.value} answer key must have "
                f"{spec.question_count} answers (got {len(self.answers)})"
            )

        for i, a in enumerate(self.answers):
            if not spec.min_choice <= a <= spec.max_choice:
                raise InvalidAnswerKeyError(
                    f"answer #{i + 1} out of range {spec.min_choice}..{spec.max_choice}: {a}"
                )

        if spec.scoring_rule is ScoringRule.WEIGHTED:
            if self.weighted_indices is None:
                raise MissingWeightConfigError(
                    f"weight configuration missing for {self.category.value}"
                )
            bad = sorted(i for i in self.weighted_indices if not 0 <= i < spec.question_count)
            if bad:
                raise InvalidAnswerKeyError(f"weighted indices out of range: {bad}")

            total = self.max_score()
            if total != spec.total_points:
                raise WeightTotalError(
                    f"weighted total must be {spec.total_points} (got {total})"
                )

        return self


@dataclass(frozen=True)
class QuestionDetail:
    index: int
    question_number: int
    chosen: int
    correct: int
    is_correct: bool
    points: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "question_number": self.question_number,
            "chosen": self.chosen,
            "correct": self.correct,
            "is_correct": self.is_correct,
            "points": self.points,
        }


@dataclass(frozen=True)
class GradedResult:
    category: AssessmentCategory
    score: int
    max_score: int
    correct_count: int
    question_count: int
    details: Tuple[QuestionDetail, ...]

    @property
    def wrong_count(self) -> int:
        return self.question_count - self.correct_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "score": self.score,
            "max_score": self.max_score,
            "correct_count": self.correct_count,
            "question_count": self.question_count,
            "details": [d.to_dict() for d in self.details],
        }


@dataclass(frozen=True)
class SubmissionAttempt:
    """제출 기록 (영속화는 어댑터 책임)."""
    student_id: int
    category: AssessmentCategory
    target_id: Optional[str]
    answers: Tuple[int, ...]
    submitted_at: datetime
    logical_date: date
    score: Optional[int] = None
    correct_count: Optional[int] = None
    question_count: Optional[int] = None
    details: List[Dict[str, Any]] = field(default_factory=list)
    id: Optional[int] = None


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class WeakPoint:
    index: int              # 1-based 문항 위치
    question_number: int    # OMR 번호
    wrong_count: int
    total_attempts: int
    wrong_rate: int         # 0~100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "question_number": self.question_number,
            "wrong_count": self.wrong_count,
            "total_attempts": self.total_attempts,
            "wrong_rate": self.wrong_rate,
        }


@dataclass(frozen=True)
class CompletionRate:
    total: int
    completed: int
    rate: int

    def to_dict(self) -> Dict[str, Any]:
        return {"total": self.total, "completed": self.completed, "rate": self.rate}
