"""
평가 유형(카테고리) 테이블 — 순수 파이썬

카테고리별 고정 문항 수 / 채점 규칙 / 선택지 범위 / OMR 번호 구간을 데이터로 보유한다.
문자열 매칭("듣기" 포함 여부 등)으로 분기하지 않는다.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from academy.domain.assessment.errors import UnknownCategoryError


class ScoringRule(str, Enum):
    """채점 규칙."""
    PERCENTAGE = "PERCENTAGE"   # round(correct / n * 100)
    WEIGHTED = "WEIGHTED"       # 문항별 배점 합산 (2점/3점)
    NONE = "NONE"               # 채점 없음 (인증 제출)


# (start, end) 포함 구간. 화면/OMR 상의 문항 번호.
Segment = Tuple[int, int]


@dataclass(frozen=True)
class CategorySpec:
    question_count: int
    scoring_rule: ScoringRule
    segments: Tuple[Segment, ...] = ()
    requires_target: bool = False
    keyed_by_target: bool = False  # target_id별로 하루 1회 슬롯 분리
    min_choice: int = 1
    max_choice: int = 5
    base_points: int = 2
    weighted_points: int = 3
    total_points: int = 100

    @property
    def is_graded(self) -> bool:
        return self.scoring_rule is not ScoringRule.NONE


class AssessmentCategory(str, Enum):
    """
    평가 유형 (DB choices와 동기화).

    - EASY           : 쉬운문제 10문항 (18-20, 25-28, 43-45)
    - LISTENING      : 듣기 17문항 (1-17)
    - LISTENING_FULL : 듣기 27문항 (1-20, 25-28, 43-45)
    - MOCK_EXAM      : 모의고사 45문항, 2점/3점 배점 = 100점 (시험 id별 하루 1회)
    - VOCAB          : 영단어 퀘스트 인증 (채점 없음, 퀘스트 id로 구분)
    """
    EASY = "easy"
    LISTENING = "listening"
    LISTENING_FULL = "listening_full"
    MOCK_EXAM = "mock_exam"
    VOCAB = "vocab"

    @property
    def spec(self) -> CategorySpec:
        return CATEGORY_SPECS[self]

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, value) -> "AssessmentCategory":
        """문자열/enum → AssessmentCategory. 모르는 값이면 UnknownCategoryError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            raise UnknownCategoryError(f"unknown assessment category: {value!r}") from None


CATEGORY_SPECS = {
    AssessmentCategory.EASY: CategorySpec(
        question_count=10,
        scoring_rule=ScoringRule.PERCENTAGE,
        segments=((18, 20), (25, 28), (43, 45)),
    ),
    AssessmentCategory.LISTENING: CategorySpec(
        question_count=17,
        scoring_rule=ScoringRule.PERCENTAGE,
        segments=((1, 17),),
    ),
    AssessmentCategory.LISTENING_FULL: CategorySpec(
        question_count=27,
        scoring_rule=ScoringRule.PERCENTAGE,
        segments=((1, 20), (25, 28), (43, 45)),
    ),
    AssessmentCategory.MOCK_EXAM: CategorySpec(
        question_count=45,
        scoring_rule=ScoringRule.WEIGHTED,
        segments=((1, 45),),
        keyed_by_target=True,
    ),
    AssessmentCategory.VOCAB: CategorySpec(
        question_count=0,
        scoring_rule=ScoringRule.NONE,
        requires_target=True,
        keyed_by_target=True,
    ),
}

CATEGORY_LABELS = {
    AssessmentCategory.EASY: "쉬운문제",
    AssessmentCategory.LISTENING: "듣기",
    AssessmentCategory.LISTENING_FULL: "듣기(27)",
    AssessmentCategory.MOCK_EXAM: "모의고사",
    AssessmentCategory.VOCAB: "영단어",
}

GRADED_CATEGORIES = tuple(c for c in AssessmentCategory if c.spec.is_graded)


# =========================================================
# OMR 번호 ↔ 배열 인덱스
# =========================================================

def question_number(category: AssessmentCategory, index: int) -> int:
    """0-based 배열 인덱스 → OMR 문항 번호. 범위 밖이면 ValueError."""
    offset = index
    for start, end in category.spec.segments:
        size = end - start + 1
        if 0 <= offset < size:
            return start + offset
        offset -= size
    raise ValueError(f"index {index} out of range for {category.value}")


def index_for_question(category: AssessmentCategory, number: int) -> Optional[int]:
    """OMR 문항 번호 → 0-based 인덱스. 해당 구간에 없으면 None."""
    base = 0
    for start, end in category.spec.segments:
        if start <= number <= end:
            return base + (number - start)
        base += end - start + 1
    return None


def target_key_for(category: AssessmentCategory, target_id) -> str:
    """
    하루 1회 유일성 판단에 쓰는 target 키.
    퀘스트 id / 시험 id로 구분하는 카테고리만 target_id를 쓰고 나머지는 빈 문자열.
    """
    if category.spec.keyed_by_target:
        return str(target_id or "")
    return ""
