# PATH: apps/domains/assessments/views/answer_key_viewset.py
"""
AnswerKey 관리 API (Admin / Staff)

Endpoint:
- GET    /assessments/answer-keys/?category=&target_id=
- POST   /assessments/answer-keys/
- PATCH  /assessments/answer-keys/{id}/
- DELETE /assessments/answer-keys/{id}/

설계 계약 (LOCKED):
- 제출 기록이 하나라도 참조하는 정답은 수정/삭제 불가 → 409 CONFLICT
- 과거 점수는 제출 시점 스냅샷이 단일 진실
"""

from __future__ import annotations

import logging

from django.db import transaction
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status as drf_status
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from academy.domain.assessment.errors import AnswerKeyLockedError
from apps.domains.assessments.filters import AnswerKeyFilter
from apps.domains.assessments.models import AnswerKey
from apps.domains.assessments.permissions import IsAdminOrStaff
from apps.domains.assessments.serializers import AnswerKeySerializer

logger = logging.getLogger(__name__)


def _locked_response(obj: AnswerKey) -> Response:
    return Response(
        {
            "detail": "answer key is referenced by submissions",
            "code": AnswerKeyLockedError.code,
            "attempt_count": obj.attempts.count(),
        },
        status=drf_status.HTTP_409_CONFLICT,
    )


class AnswerKeyViewSet(ModelViewSet):
    queryset = AnswerKey.objects.all()
    serializer_class = AnswerKeySerializer
    permission_classes = [IsAuthenticated, IsAdminOrStaff]

    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = AnswerKeyFilter
    ordering_fields = ["id", "category", "target_id", "updated_at"]
    ordering = ["category", "target_id"]

    def _get_object_for_update(self) -> AnswerKey:
        """
        권한/404 판정은 get_object, 이후 행 잠금.
        제출 insert(FK 참조)는 이 잠금이 풀릴 때까지 대기한다.
        """
        obj: AnswerKey = self.get_object()
        return AnswerKey.objects.select_for_update().get(pk=obj.pk)

    def update(self, request, *args, **kwargs):
        with transaction.atomic():
            obj = self._get_object_for_update()

            # -------------------------------------------------
            # LOCK 방어 (PUT / PATCH 공통)
            # -------------------------------------------------
            if obj.is_locked:
                logger.info("ANSWER_KEY_LOCKED id=%s action=update", obj.id)
                return _locked_response(obj)

            return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        with transaction.atomic():
            obj = self._get_object_for_update()
            if obj.is_locked:
                logger.info("ANSWER_KEY_LOCKED id=%s action=destroy", obj.id)
                return _locked_response(obj)

            return super().destroy(request, *args, **kwargs)
