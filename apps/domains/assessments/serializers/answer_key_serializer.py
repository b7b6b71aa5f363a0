# PATH: apps/domains/assessments/serializers/answer_key_serializer.py
"""
AnswerKey 관리 Serializer (staff)

✅ 저장 전 도메인 검증
- 길이 == 카테고리 고정 문항 수
- 선택지 범위
- 모의고사: 배점 설정 필수 + 합계 100
"""

from __future__ import annotations

from rest_framework import serializers

from academy.domain.assessment.entities import AnswerKey as AnswerKeyEntity
from academy.domain.assessment.errors import AssessmentConfigError
from apps.domains.assessments.models import AnswerKey


class AnswerKeySerializer(serializers.ModelSerializer):
    answers = serializers.ListField(child=serializers.IntegerField())
    weighted_indices = serializers.ListField(
        child=serializers.IntegerField(min_value=0),
        required=False,
        allow_null=True,
    )
    question_count = serializers.SerializerMethodField()
    max_score = serializers.SerializerMethodField()
    is_locked = serializers.BooleanField(read_only=True)

    class Meta:
        model = AnswerKey
        fields = [
            "id",
            "category",
            "target_id",
            "title",
            "answers",
            "weighted_indices",
            "question_count",
            "max_score",
            "is_locked",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def get_question_count(self, obj) -> int:
        return len(obj.answers or [])

    def get_max_score(self, obj):
        try:
            return AnswerKeyEntity.build(
                category=obj.category,
                answers=obj.answers or [],
                weighted_indices=obj.weighted_indices,
            ).max_score()
        except AssessmentConfigError:
            return None

    def validate(self, attrs):
        instance = self.instance

        def _pick(name, default=None):
            if name in attrs:
                return attrs[name]
            return getattr(instance, name, default) if instance is not None else default

        try:
            key = AnswerKeyEntity.build(
                category=_pick("category"),
                answers=_pick("answers", []) or [],
                weighted_indices=_pick("weighted_indices"),
                target_id=_pick("target_id"),
            ).validate()
        except AssessmentConfigError as e:
            raise serializers.ValidationError({"detail": str(e), "code": e.code})

        attrs["answers"] = list(key.answers)
        if "weighted_indices" in attrs and key.weighted_indices is not None:
            attrs["weighted_indices"] = sorted(key.weighted_indices)
        return attrs
