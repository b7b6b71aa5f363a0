# PATH: apps/domains/assessments/models/submission_attempt.py
from __future__ import annotations

from django.db import models

from apps.api.common.models import BaseModel
from .answer_key import AnswerKey
from .choices import CategoryChoices


class SubmissionAttempt(BaseModel):
    """
    SubmissionAttempt (학생 제출 기록)

    ✅ 단일 진실
    - (student, category, target_key, logical_date) 당 1건 (DB 유니크 제약)
    - 채점 결과는 제출 시점 스냅샷 (score / details). 이후 수정하지 않는다.

    target_key: 영단어(퀘스트)·모의고사(시험 id)처럼 대상별로 하루 1회인 카테고리만 target_id, 나머지는 "".
    """

    student_id = models.PositiveIntegerField(db_index=True)

    category = models.CharField(max_length=20, choices=CategoryChoices.choices)
    target_id = models.CharField(max_length=64, blank=True, default="")
    target_key = models.CharField(max_length=64, blank=True, default="")

    # 숙제 날짜 (새벽 3시 기준)
    logical_date = models.DateField()
    submitted_at = models.DateTimeField()

    answers = models.JSONField(default=list, blank=True)

    # 채점 스냅샷 (채점 없는 카테고리는 null)
    score = models.IntegerField(null=True, blank=True)
    max_score = models.IntegerField(null=True, blank=True)
    correct_count = models.IntegerField(null=True, blank=True)
    question_count = models.IntegerField(null=True, blank=True)
    details = models.JSONField(default=list, blank=True)

    answer_key = models.ForeignKey(
        AnswerKey,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="attempts",
    )

    class Meta:
        db_table = "assessments_submission_attempt"
        ordering = ["-logical_date", "-submitted_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["student_id", "category", "target_key", "logical_date"],
                name="uniq_assessment_attempt_student_category_target_day",
            )
        ]
        indexes = [
            models.Index(
                fields=["student_id", "category", "logical_date"],
                name="assess_attempt_student_day_idx",
            ),
        ]

    def __str__(self) -> str:
        return (
            f"SubmissionAttempt("
            f"student={self.student_id}, "
            f"{self.category}, "
            f"date={self.logical_date})"
        )
