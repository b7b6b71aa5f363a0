# PATH: apps/domains/assessments/models/answer_key.py
from __future__ import annotations

from django.db import models

from apps.api.common.models import BaseModel
from .choices import CategoryChoices


class AnswerKey(BaseModel):
    """
    카테고리(+target)별 정답 정의

    answers: [int, ...] (0-based 배열, 길이 = 카테고리 고정 문항 수)
    weighted_indices: 3점 문항의 0-based 인덱스 (모의고사 전용, 그 외 null)

    ⚠️ 제출 기록이 하나라도 참조하면 수정/삭제 불가 (LOCKED)
    """

    category = models.CharField(max_length=20, choices=CategoryChoices.choices, db_index=True)

    # 모의고사 회차 / 듣기 세트 등. 카테고리당 하나뿐이면 빈 문자열
    target_id = models.CharField(max_length=64, blank=True, default="")

    title = models.CharField(max_length=200, blank=True, default="")

    answers = models.JSONField(default=list)
    weighted_indices = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = "assessments_answer_key"
        ordering = ["category", "target_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["category", "target_id"],
                name="uniq_assessment_answer_key_category_target",
            )
        ]

    @property
    def is_locked(self) -> bool:
        return self.attempts.exists()

    def __str__(self) -> str:
        return f"AnswerKey({self.category}/{self.target_id or '-'})"
