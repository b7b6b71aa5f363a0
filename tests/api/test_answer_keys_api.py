"""/api/v1/assessments/answer-keys/ 정답 관리 (staff)."""
from __future__ import annotations

import pytest
from django.db import transaction
from django.db.models.query import QuerySet
from django.utils import timezone

from apps.domains.assessments.models import AnswerKey, SubmissionAttempt

pytestmark = pytest.mark.django_db

URL = "/api/v1/assessments/answer-keys/"

MOCK_ANSWERS = [(i % 5) + 1 for i in range(45)]


def _mock_payload(weighted):
    return {
        "category": "mock_exam",
        "target_id": "2024-06",
        "title": "6월 모의고사",
        "answers": MOCK_ANSWERS,
        "weighted_indices": weighted,
    }


def test_staff_only(student_api) -> None:
    res = student_api.get(URL)
    assert res.status_code == 403


def test_create_mock_exam_key(staff_api) -> None:
    res = staff_api.post(URL, _mock_payload(list(range(10))), format="json")
    assert res.status_code == 201
    assert res.data["question_count"] == 45
    assert res.data["max_score"] == 100
    assert res.data["is_locked"] is False

    key = AnswerKey.objects.get(target_id="2024-06")
    assert key.weighted_indices == list(range(10))


def test_reject_weight_total_not_100(staff_api) -> None:
    res = staff_api.post(URL, _mock_payload(list(range(9))), format="json")
    assert res.status_code == 400
    assert "invalid_weight_total" in res.data["code"]
    assert AnswerKey.objects.count() == 0


def test_reject_missing_weights(staff_api) -> None:
    res = staff_api.post(URL, _mock_payload(None), format="json")
    assert res.status_code == 400
    assert "missing_weight_config" in res.data["code"]


def test_reject_wrong_length(staff_api) -> None:
    res = staff_api.post(URL, {"category": "easy", "answers": [1] * 9}, format="json")
    assert res.status_code == 400
    assert "invalid_answer_key" in res.data["code"]


def test_update_unreferenced_key(staff_api) -> None:
    key = AnswerKey.objects.create(category="easy", answers=[1] * 10)
    res = staff_api.patch(f"{URL}{key.id}/", {"answers": [2] * 10}, format="json")
    assert res.status_code == 200
    key.refresh_from_db()
    assert key.answers == [2] * 10


def test_referenced_key_is_locked(staff_api) -> None:
    key = AnswerKey.objects.create(category="easy", answers=[1] * 10)
    SubmissionAttempt.objects.create(
        student_id=1,
        category="easy",
        logical_date=timezone.localdate(),
        submitted_at=timezone.now(),
        answers=[1] * 10,
        score=100,
        answer_key=key,
    )

    res = staff_api.patch(f"{URL}{key.id}/", {"answers": [2] * 10}, format="json")
    assert res.status_code == 409
    assert res.data["code"] == "LOCKED"
    assert res.data["attempt_count"] == 1

    res = staff_api.delete(f"{URL}{key.id}/")
    assert res.status_code == 409

    key.refresh_from_db()
    assert key.answers == [1] * 10


def test_update_checks_lock_on_locked_row(staff_api, monkeypatch) -> None:
    calls = []
    original_select_for_update = QuerySet.select_for_update
    original_atomic = transaction.atomic

    def recording_select_for_update(self, *args, **kwargs):
        calls.append(("select_for_update", self.model))
        return original_select_for_update(self, *args, **kwargs)

    def recording_atomic(*args, **kwargs):
        calls.append(("atomic", None))
        return original_atomic(*args, **kwargs)

    key = AnswerKey.objects.create(category="easy", answers=[1] * 10)
    monkeypatch.setattr(QuerySet, "select_for_update", recording_select_for_update)
    monkeypatch.setattr(transaction, "atomic", recording_atomic)

    res = staff_api.patch(f"{URL}{key.id}/", {"answers": [2] * 10}, format="json")

    assert res.status_code == 200
    assert calls.index(("atomic", None)) < calls.index(("select_for_update", AnswerKey))


def test_filter_by_category(staff_api) -> None:
    AnswerKey.objects.create(category="easy", answers=[1] * 10)
    AnswerKey.objects.create(category="listening", answers=[1] * 17)
    res = staff_api.get(URL, {"category": "easy"})
    assert res.status_code == 200
    assert [row["category"] for row in res.data["results"]] == ["easy"]
