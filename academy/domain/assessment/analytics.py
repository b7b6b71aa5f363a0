"""
숙제 이행률 / 취약 문항 / 성적 추이 집계 — 순수 함수

✅ 원칙
- 읽기 전용 (저장 금지)
- 과거 데이터 일부가 깨져 있어도 전체 집계를 중단하지 않는다 (해당 행만 건너뜀)
- 분석은 참고용: 예외 대신 빈 리스트 / 'stable' 로 degrade
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

from academy.domain.assessment.categories import AssessmentCategory, question_number
from academy.domain.assessment.entities import (
    CompletionRate,
    QuestionDetail,
    Trend,
    WeakPoint,
)
from academy.domain.shared.numbers import mean, percent, round_half_up

logger = logging.getLogger(__name__)

TREND_WINDOW = 3
TREND_THRESHOLD = 3  # 노이즈 필터 (고정 상수)

WEAK_POINT_MIN_ATTEMPTS = 2
WEAK_POINT_TOP_N = 5

LOW_COMPLETION_RATE = 70
LOW_MOCK_AVERAGE = 70
MAX_SUGGESTIONS = 4


# =========================================================
# A) 숙제 이행률
# =========================================================

def completion_rate(
    expected_dates: Iterable[Hashable],
    submitted_dates: Iterable[Hashable],
) -> CompletionRate:
    """
    기대 항목(날짜 또는 (카테고리, 날짜)) 중 제출된 비율.
    숙제 없음(total=0)은 이행률 100.
    """
    expected = set(expected_dates)
    submitted = set(submitted_dates)

    total = len(expected)
    if total == 0:
        return CompletionRate(total=0, completed=0, rate=100)

    completed = len(expected & submitted)
    return CompletionRate(total=total, completed=completed, rate=percent(completed, total))


# =========================================================
# B) 성적 추이
# =========================================================

def trend(scores: Sequence[float]) -> Trend:
    """
    scores: 오래된 것 → 최신 순.
    최근 3개 평균 vs 그 이전 3개 평균, ±3 초과 시 up/down.
    """
    values = [s for s in scores if s is not None]
    if len(values) < 2:
        return Trend.STABLE

    recent = values[-TREND_WINDOW:]
    older = values[-2 * TREND_WINDOW:-TREND_WINDOW]
    if not older:
        return Trend.STABLE

    diff = mean(recent) - mean(older)
    if diff > TREND_THRESHOLD:
        return Trend.UP
    if diff < -TREND_THRESHOLD:
        return Trend.DOWN
    return Trend.STABLE


def average_score(scores: Sequence[float]) -> int:
    values = [s for s in scores if s is not None]
    if not values:
        return 0
    return round_half_up(mean(values))


# =========================================================
# C) 취약 문항
# =========================================================

def _detail_fields(detail: Any) -> Optional[Tuple[int, bool]]:
    """detail 한 행 → (0-based index, is_correct). 깨진 행이면 None."""
    if isinstance(detail, QuestionDetail):
        return detail.index, detail.is_correct

    if not isinstance(detail, Mapping):
        return None

    index = detail.get("index")
    is_correct = detail.get("is_correct")
    if index is None or not isinstance(is_correct, bool):
        return None
    try:
        return int(index), is_correct
    except (TypeError, ValueError):
        return None


def weak_points(
    results: Iterable[Any],
    question_count: int,
    *,
    category: Optional[AssessmentCategory] = None,
    min_attempts: int = WEAK_POINT_MIN_ATTEMPTS,
    top_n: int = WEAK_POINT_TOP_N,
) -> List[WeakPoint]:
    """
    results: GradedResult 또는 detail 리스트(저장된 JSON)의 나열.

    - 시도 < min_attempts 제외
    - 한 번도 틀리지 않은 문항 제외
    - 오답률 내림차순, 동률은 문항 위치 오름차순
    """
    stats: Dict[int, List[int]] = {i: [0, 0] for i in range(1, int(question_count) + 1)}
    skipped = 0

    for result in results:
        if isinstance(result, Mapping):
            details = result.get("details")
        else:
            details = getattr(result, "details", result)
        if not isinstance(details, (list, tuple)):
            skipped += 1
            continue

        for detail in details:
            fields = _detail_fields(detail)
            if fields is None:
                skipped += 1
                continue

            index, is_correct = fields
            stat = stats.get(index + 1)
            if stat is None:
                skipped += 1
                continue

            stat[0] += 1
            if not is_correct:
                stat[1] += 1

    if skipped:
        logger.warning("weak_points skipped %s malformed detail rows", skipped)

    points: List[WeakPoint] = []
    for position, (total, wrong) in stats.items():
        if total < min_attempts or wrong == 0:
            continue
        points.append(
            WeakPoint(
                index=position,
                question_number=_safe_question_number(category, position),
                wrong_count=wrong,
                total_attempts=total,
                wrong_rate=percent(wrong, total),
            )
        )

    points.sort(key=lambda w: (-w.wrong_rate, w.index))
    return points[: int(top_n)]


def _safe_question_number(category: Optional[AssessmentCategory], position: int) -> int:
    if category is None:
        return position
    try:
        return question_number(category, position - 1)
    except ValueError:
        return position


# =========================================================
# D) 놓친 숙제
# =========================================================

@dataclass(frozen=True)
class MissedHomework:
    by_category: Dict[str, int] = field(default_factory=dict)
    total: int = 0
    details: Tuple[Tuple[date, AssessmentCategory], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "by_category": dict(self.by_category),
            "total": self.total,
            "details": [
                {"date": d.isoformat(), "category": c.value, "label": c.label}
                for d, c in self.details
            ],
        }


def missed_homework(
    expected_by_category: Mapping[AssessmentCategory, Iterable[date]],
    submitted_by_category: Mapping[AssessmentCategory, Iterable[date]],
) -> MissedHomework:
    counts: Dict[str, int] = {}
    details: List[Tuple[date, AssessmentCategory]] = []

    for category, expected in expected_by_category.items():
        submitted = set(submitted_by_category.get(category, ()))
        missed = [d for d in set(expected) if d not in submitted]
        counts[category.value] = len(missed)
        details.extend((d, category) for d in missed)

    details.sort(key=lambda row: (row[0], row[1].value), reverse=True)
    return MissedHomework(
        by_category=counts,
        total=sum(counts.values()),
        details=tuple(details),
    )


# =========================================================
# E) 학습 제안
# =========================================================

def suggestions(
    *,
    weekly_completion_rate: int,
    mock_average: int,
    weak_points_by_category: Mapping[AssessmentCategory, Sequence[WeakPoint]],
) -> List[str]:
    out: List[str] = []

    if weekly_completion_rate < LOW_COMPLETION_RATE:
        out.append("숙제 완료율이 낮습니다. 꾸준한 숙제 수행이 성적 향상에 중요합니다.")

    mock_weak = weak_points_by_category.get(AssessmentCategory.MOCK_EXAM) or []
    if mock_weak:
        out.append(
            f"모의고사 {mock_weak[0].question_number}번 문제 유형을 집중적으로 복습해보세요."
        )

    listening_weak = (
        weak_points_by_category.get(AssessmentCategory.LISTENING)
        or weak_points_by_category.get(AssessmentCategory.LISTENING_FULL)
        or []
    )
    if listening_weak:
        out.append("듣기 취약 문항을 반복 청취하고 받아쓰기 연습을 해보세요.")

    if 0 < mock_average < LOW_MOCK_AVERAGE:
        out.append("모의고사 점수 향상을 위해 오답 노트를 작성해보세요.")

    if not out:
        out.append("꾸준히 잘 하고 있습니다! 현재 페이스를 유지하세요.")

    return out[:MAX_SUGGESTIONS]
