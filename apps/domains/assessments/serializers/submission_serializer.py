# PATH: apps/domains/assessments/serializers/submission_serializer.py
"""
제출 / 조회 Serializers

⚠️ 주의
- answers 배열 길이 검증은 채점기(도메인) 책임 → 여기서는 타입만 본다
- 0 또는 null = 미응답
"""

from __future__ import annotations

from rest_framework import serializers

from apps.domains.assessments.models import SubmissionAttempt
from apps.domains.assessments.models.choices import CategoryChoices


class GateQuerySerializer(serializers.Serializer):
    category = serializers.ChoiceField(choices=CategoryChoices.choices)
    target_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)


class SubmitSerializer(GateQuerySerializer):
    answers = serializers.ListField(
        child=serializers.IntegerField(min_value=0, allow_null=True),
        required=False,
        default=list,
    )


class MissedQuerySerializer(serializers.Serializer):
    days = serializers.IntegerField(required=False, default=7, min_value=1, max_value=90)


class SubmissionAttemptSerializer(serializers.ModelSerializer):
    category_label = serializers.CharField(source="get_category_display", read_only=True)

    class Meta:
        model = SubmissionAttempt
        fields = [
            "id",
            "student_id",
            "category",
            "category_label",
            "target_id",
            "logical_date",
            "submitted_at",
            "answers",
            "score",
            "max_score",
            "correct_count",
            "question_count",
            "details",
            "created_at",
        ]
        read_only_fields = fields
