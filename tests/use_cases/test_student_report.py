"""리포트 / 오늘 현황 / 놓친 숙제 (읽기 전용)."""
from __future__ import annotations

from datetime import date

from academy.application.use_cases.assessment.student_report import (
    build_student_report,
    missed_homework,
    today_status,
)
from academy.application.use_cases.assessment.submit_assessment import submit_assessment
from academy.domain.assessment.categories import AssessmentCategory
from academy.domain.assessment.entities import AnswerKey
from tests.fakes import kst

L = AssessmentCategory.LISTENING
E = AssessmentCategory.EASY
V = AssessmentCategory.VOCAB


def _seed_listening(uow, scores_by_day):
    """scores_by_day: {day: 정답 개수(17문항 중)}"""
    uow.answer_keys.add(AnswerKey.build(category="listening", answers=[1] * 17))
    for day, correct in scores_by_day.items():
        answers = [1] * correct + [2] * (17 - correct)
        outcome = submit_assessment(uow, student_id=3, category=L, answers=answers, now=kst(2024, 3, day, 20))
        assert outcome.ok


def test_today_status_flags_submitted_categories(uow) -> None:
    _seed_listening(uow, {15: 17})
    status = today_status(uow, student_id=3, now=kst(2024, 3, 16, 1))

    assert status["logical_date"] == "2024-03-15"
    assert status["deadline_display"] == "오늘 새벽 3시"
    assert status["time_remaining"] == "2시간 0분"
    assert status["submitted"] == {"listening": True, "easy": False, "vocab": False}


def test_missed_homework_only_counts_assigned_days(uow) -> None:
    _seed_listening(uow, {13: 17})
    uow.calendar.assign(3, L, date(2024, 3, 12), date(2024, 3, 13), date(2024, 3, 14))
    uow.calendar.assign(3, E, date(2024, 3, 14), date(2024, 3, 15))

    missed = missed_homework(uow, student_id=3, days=7, now=kst(2024, 3, 15, 12))

    # 3/15(오늘)은 제외
    assert missed.by_category == {"listening": 2, "easy": 1, "vocab": 0}
    assert missed.total == 3
    assert missed.details[0][0] == date(2024, 3, 14)


def test_report_sections(uow) -> None:
    # 6회: 70점대 → 80점대 (up)
    _seed_listening(uow, {10: 12, 11: 12, 12: 12, 13: 15, 14: 15, 15: 15})
    uow.calendar.assign(3, L, *[date(2024, 3, d) for d in range(9, 16)])

    report = build_student_report(uow, student_id=3, now=kst(2024, 3, 15, 22))

    listening = report["categories"]["listening"]
    assert listening["count"] == 6
    assert [s["score"] for s in listening["scores"]] == [71, 71, 71, 88, 88, 88]
    assert listening["average"] == 80  # 79.5
    assert listening["trend"] == "up"
    assert listening["label"] == "듣기"
    # 16~17번은 6회 모두 오답, 13~15번은 3회 오답
    assert [w["index"] for w in listening["weak_points"]] == [16, 17, 13, 14, 15]
    assert listening["weak_points"][0]["wrong_rate"] == 100
    assert len(listening["weak_points"]) == 5

    assert report["categories"]["mock_exam"]["count"] == 0
    assert report["categories"]["mock_exam"]["trend"] == "stable"

    weekly = report["weekly_homework"]
    assert weekly["total"] == 7
    assert weekly["completed"] == 6
    assert weekly["rate"] == 86
    assert weekly["by_category"]["easy"]["rate"] == 100

    assert report["suggestions"]
    assert any("듣기" in tip for tip in report["suggestions"])


def test_report_history_limit(uow) -> None:
    _seed_listening(uow, {d: 17 for d in range(1, 11)})
    report = build_student_report(uow, student_id=3, history_limit=3, now=kst(2024, 3, 10, 22))
    scores = report["categories"]["listening"]["scores"]
    assert [s["date"] for s in scores] == ["2024-03-08", "2024-03-09", "2024-03-10"]


def test_report_for_new_student(uow) -> None:
    report = build_student_report(uow, student_id=99, now=kst(2024, 3, 15))
    assert report["weekly_homework"]["rate"] == 100
    assert report["suggestions"] == ["꾸준히 잘 하고 있습니다! 현재 페이스를 유지하세요."]
