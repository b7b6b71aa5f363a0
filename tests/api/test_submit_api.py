"""/api/v1/assessments/ 학생 API."""
from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.domains.assessments.models import (
    AnswerKey,
    HomeworkAssignmentDay,
    SubmissionAttempt,
)
from apps.domains.assessments.services import get_homework_clock

pytestmark = pytest.mark.django_db

BASE = "/api/v1/assessments"


@pytest.fixture
def listening_key(db) -> AnswerKey:
    return AnswerKey.objects.create(category="listening", answers=[3] * 17)


def test_requires_authentication(api) -> None:
    res = api.post(f"{BASE}/submit/", {"category": "listening", "answers": [3] * 17}, format="json")
    assert res.status_code in (401, 403)


def test_gate_allows_first_submission(student_api) -> None:
    res = student_api.get(f"{BASE}/gate/", {"category": "listening"})
    assert res.status_code == 200
    assert res.data["allowed"] is True
    assert res.data["reason"] is None


def test_submit_grades_and_persists(student_api, student, listening_key) -> None:
    res = student_api.post(
        f"{BASE}/submit/",
        {"category": "listening", "answers": [3] * 16 + [None]},
        format="json",
    )
    assert res.status_code == 201
    assert res.data["result"]["score"] == 94
    assert res.data["result"]["details"][16]["chosen"] == 0

    row = SubmissionAttempt.objects.get(student_id=student.id)
    assert row.score == 94
    assert row.answer_key_id == listening_key.id
    assert row.target_key == ""
    assert row.logical_date == get_homework_clock().logical_date(timezone.now())


def test_second_submission_same_day_conflicts(student_api, listening_key) -> None:
    payload = {"category": "listening", "answers": [3] * 17}
    assert student_api.post(f"{BASE}/submit/", payload, format="json").status_code == 201

    res = student_api.post(f"{BASE}/submit/", payload, format="json")
    assert res.status_code == 409
    assert res.data["reason"] == "already submitted today"
    assert res.data["code"] == "ALREADY_SUBMITTED"
    assert SubmissionAttempt.objects.count() == 1

    gate = student_api.get(f"{BASE}/gate/", {"category": "listening"})
    assert gate.data["allowed"] is False


def test_other_student_not_blocked(student_api, other_student, listening_key) -> None:
    payload = {"category": "listening", "answers": [3] * 17}
    student_api.post(f"{BASE}/submit/", payload, format="json")

    student_api.force_authenticate(user=other_student)
    assert student_api.post(f"{BASE}/submit/", payload, format="json").status_code == 201


def test_length_mismatch_is_server_error(student_api, listening_key) -> None:
    res = student_api.post(f"{BASE}/submit/", {"category": "listening", "answers": [3] * 5}, format="json")
    assert res.status_code == 500
    assert res.data["code"] == "answer_length_mismatch"
    assert SubmissionAttempt.objects.count() == 0


def test_missing_answer_key_is_404(student_api) -> None:
    res = student_api.post(f"{BASE}/submit/", {"category": "easy", "answers": [1] * 10}, format="json")
    assert res.status_code == 404
    assert res.data["code"] == "answer_key_not_found"


def test_vocab_requires_target(student_api) -> None:
    res = student_api.post(f"{BASE}/submit/", {"category": "vocab"}, format="json")
    assert res.status_code == 400
    assert res.data["code"] == "target_required"


def test_vocab_per_quest(student_api) -> None:
    first = student_api.post(f"{BASE}/submit/", {"category": "vocab", "target_id": "q1"}, format="json")
    second = student_api.post(f"{BASE}/submit/", {"category": "vocab", "target_id": "q2"}, format="json")
    again = student_api.post(f"{BASE}/submit/", {"category": "vocab", "target_id": "q1"}, format="json")

    assert (first.status_code, second.status_code, again.status_code) == (201, 201, 409)
    assert first.data["result"] is None
    assert sorted(SubmissionAttempt.objects.values_list("target_key", flat=True)) == ["q1", "q2"]


def test_unknown_category_is_bad_request(student_api) -> None:
    res = student_api.post(f"{BASE}/submit/", {"category": "grammar", "answers": []}, format="json")
    assert res.status_code == 400


def test_attempts_lists_only_own(student_api, student, other_student, listening_key) -> None:
    today = get_homework_clock().logical_date(timezone.now())
    SubmissionAttempt.objects.create(
        student_id=other_student.id,
        category="listening",
        logical_date=today,
        submitted_at=timezone.now(),
        score=10,
    )
    student_api.post(f"{BASE}/submit/", {"category": "listening", "answers": [3] * 17}, format="json")

    res = student_api.get(f"{BASE}/attempts/", {"category": "listening"})
    assert res.status_code == 200
    assert res.data["count"] == 1
    assert res.data["results"][0]["student_id"] == student.id
    assert res.data["results"][0]["category_label"] == "듣기"


def test_today_and_missed(student_api, student, listening_key) -> None:
    clock = get_homework_clock()
    today = clock.logical_date(timezone.now())
    HomeworkAssignmentDay.objects.create(
        student_id=student.id, category="listening", homework_date=today - timedelta(days=1),
    )
    student_api.post(f"{BASE}/submit/", {"category": "listening", "answers": [3] * 17}, format="json")

    status = student_api.get(f"{BASE}/today/")
    assert status.status_code == 200
    assert status.data["submitted"]["listening"] is True
    assert status.data["submitted"]["easy"] is False

    missed = student_api.get(f"{BASE}/missed/", {"days": 7})
    assert missed.status_code == 200
    assert missed.data["total"] == 1
    assert missed.data["by_category"]["listening"] == 1


def test_report(student_api, listening_key) -> None:
    student_api.post(f"{BASE}/submit/", {"category": "listening", "answers": [3] * 17}, format="json")

    res = student_api.get(f"{BASE}/report/")
    assert res.status_code == 200
    assert res.data["categories"]["listening"]["count"] == 1
    assert res.data["categories"]["listening"]["average"] == 100
    assert "weekly_homework" in res.data
    assert res.data["suggestions"]
