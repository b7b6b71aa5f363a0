"""
학생 리포트 / 오늘 숙제 현황 / 놓친 숙제 Use Case — 읽기 전용

Aggregator는 절대 쓰지 않는다. 저장소에서 읽고 순수 함수로 집계만 한다.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Sequence

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.assessment import analytics
from academy.domain.assessment.categories import GRADED_CATEGORIES, AssessmentCategory
from academy.domain.assessment.clock import DEFAULT_CLOCK, HomeworkClock

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20
WEEK_DAYS = 7
MONTH_DAYS = 30
DAILY_CATEGORIES = (
    AssessmentCategory.LISTENING,
    AssessmentCategory.EASY,
    AssessmentCategory.VOCAB,
)


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def today_status(
    uow: UnitOfWork,
    *,
    student_id: int,
    categories: Sequence[AssessmentCategory] = DAILY_CATEGORIES,
    now: Optional[datetime] = None,
    clock: HomeworkClock = DEFAULT_CLOCK,
) -> Dict[str, Any]:
    """오늘(숙제 날짜 기준) 카테고리별 제출 여부 + 마감 표기."""
    now = _now(now)
    today = clock.logical_date(now)

    submitted = uow.attempts.submitted_dates(student_id, list(categories), today, today)

    return {
        "logical_date": today.isoformat(),
        "deadline": clock.deadline(today).isoformat(),
        "deadline_display": clock.format_deadline(today, now),
        "time_remaining": clock.time_remaining(today, now),
        "submitted": {
            c.value: today in submitted.get(c, set())
            for c in categories
        },
    }


def missed_homework(
    uow: UnitOfWork,
    *,
    student_id: int,
    days: int = WEEK_DAYS,
    categories: Sequence[AssessmentCategory] = DAILY_CATEGORIES,
    now: Optional[datetime] = None,
    clock: HomeworkClock = DEFAULT_CLOCK,
) -> analytics.MissedHomework:
    """최근 N일(오늘 제외) 중 배정됐는데 제출하지 않은 숙제."""
    dates = clock.recent_logical_dates(_now(now), days)
    if not dates:
        return analytics.MissedHomework()

    start, end = min(dates), max(dates)
    window = set(dates)

    assigned = uow.calendar.assigned_dates(student_id, list(categories), start, end)
    submitted = uow.attempts.submitted_dates(student_id, list(categories), start, end)

    expected = {c: {d for d in assigned.get(c, set()) if d in window} for c in categories}
    return analytics.missed_homework(expected, submitted)


def _window_completion(
    uow: UnitOfWork,
    *,
    student_id: int,
    categories: Sequence[AssessmentCategory],
    today,
    days: int,
) -> Dict[str, Any]:
    start = today - timedelta(days=days - 1)
    assigned = uow.calendar.assigned_dates(student_id, list(categories), start, today)
    submitted = uow.attempts.submitted_dates(student_id, list(categories), start, today)

    expected_pairs = {(c, d) for c in categories for d in assigned.get(c, set())}
    submitted_pairs = {(c, d) for c in categories for d in submitted.get(c, set())}

    overall = analytics.completion_rate(expected_pairs, submitted_pairs)
    by_category = {
        c.value: analytics.completion_rate(
            assigned.get(c, set()), submitted.get(c, set())
        ).to_dict()
        for c in categories
    }
    return {**overall.to_dict(), "by_category": by_category}


def build_student_report(
    uow: UnitOfWork,
    *,
    student_id: int,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    now: Optional[datetime] = None,
    clock: HomeworkClock = DEFAULT_CLOCK,
) -> Dict[str, Any]:
    """
    학생 상세 리포트

    반환 스키마:
    {
      "student_id": int,
      "logical_date": "YYYY-MM-DD",
      "categories": {
        "<category>": {
          "count", "average", "trend",
          "scores": [{"date", "score", "target_id"}],
          "weak_points": [...]
        }
      },
      "weekly_homework": {total, completed, rate, by_category},
      "monthly_homework": {...},
      "suggestions": [str]
    }
    """
    now = _now(now)
    today = clock.logical_date(now)

    categories: Dict[str, Any] = {}
    weak_by_category = {}
    averages = {}

    for category in GRADED_CATEGORIES:
        attempts = uow.attempts.recent(student_id, category, history_limit)
        scores: List[int] = [a.score for a in attempts if a.score is not None]

        weak = analytics.weak_points(
            [a.details for a in attempts],
            category.spec.question_count,
            category=category,
        )
        weak_by_category[category] = weak
        averages[category] = analytics.average_score(scores)

        categories[category.value] = {
            "label": category.label,
            "count": len(scores),
            "average": averages[category],
            "trend": analytics.trend(scores).value,
            "scores": [
                {
                    "date": a.logical_date.isoformat(),
                    "score": a.score,
                    "target_id": a.target_id,
                }
                for a in attempts
                if a.score is not None
            ],
            "weak_points": [w.to_dict() for w in weak],
        }

    daily = list(DAILY_CATEGORIES)
    weekly = _window_completion(
        uow, student_id=student_id, categories=daily, today=today, days=WEEK_DAYS
    )
    monthly = _window_completion(
        uow, student_id=student_id, categories=daily, today=today, days=MONTH_DAYS
    )

    tips = analytics.suggestions(
        weekly_completion_rate=weekly["rate"],
        mock_average=averages.get(AssessmentCategory.MOCK_EXAM, 0),
        weak_points_by_category=weak_by_category,
    )

    logger.debug("report built student=%s date=%s", student_id, today)

    return {
        "student_id": int(student_id),
        "logical_date": today.isoformat(),
        "categories": categories,
        "weekly_homework": weekly,
        "monthly_homework": monthly,
        "suggestions": tips,
    }
