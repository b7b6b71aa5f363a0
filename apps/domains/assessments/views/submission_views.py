# PATH: apps/domains/assessments/views/submission_views.py
"""
제출 API (Student)

Endpoint:
- GET  /assessments/gate/?category=&target_id=
- POST /assessments/submit/
- GET  /assessments/attempts/?category=&date_from=&date_to=

설계 계약:
- 학생 id는 request.user 기준 (payload로 받지 않음)
- 마감/중복 → 409 {"detail", "reason", "code"}
- 설정 오류(정답 길이 불일치 등) → 500 {"detail", "code"} + error 로그
"""

from __future__ import annotations

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status as drf_status
from rest_framework.filters import OrderingFilter
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.application.use_cases.assessment.submit_assessment import (
    check_submission,
    submit_assessment,
)
from academy.domain.assessment.errors import (
    AnswerKeyNotFoundError,
    AssessmentConfigError,
    TargetRequiredError,
)
from academy.domain.assessment.gate import (
    REASON_ALREADY_SUBMITTED,
    REASON_DEADLINE_PASSED,
)
from apps.domains.assessments.filters import SubmissionAttemptFilter
from apps.domains.assessments.models import SubmissionAttempt
from apps.domains.assessments.serializers import (
    GateQuerySerializer,
    SubmissionAttemptSerializer,
    SubmitSerializer,
)
from apps.domains.assessments.services import (
    get_homework_clock,
    get_submission_lock,
    get_uow,
)

logger = logging.getLogger(__name__)

REJECT_CODES = {
    REASON_DEADLINE_PASSED: "DEADLINE_PASSED",
    REASON_ALREADY_SUBMITTED: "ALREADY_SUBMITTED",
}


def _rejected_response(message: str, reason: str) -> Response:
    return Response(
        {
            "detail": message,
            "reason": reason,
            "code": REJECT_CODES.get(reason, "REJECTED"),
        },
        status=drf_status.HTTP_409_CONFLICT,
    )


def _error_response(e: Exception, status: int) -> Response:
    return Response(
        {"detail": str(e), "code": getattr(e, "code", "error")},
        status=status,
    )


class GateView(APIView):
    """
    GET /assessments/gate/?category=&target_id=

    제출 가능 여부만 판단 (저장 없음).
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        q = GateQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)

        try:
            decision = check_submission(
                get_uow(),
                student_id=request.user.id,
                category=q.validated_data["category"],
                target_id=q.validated_data.get("target_id") or None,
                clock=get_homework_clock(),
            )
        except TargetRequiredError as e:
            return _error_response(e, drf_status.HTTP_400_BAD_REQUEST)

        data = decision.to_dict()
        data["message"] = decision.message
        return Response(data)


class SubmitView(APIView):
    """
    POST /assessments/submit/

    body:
    {
      "category": "listening",
      "target_id": "q-12",          # 영단어 퀘스트 등 (선택)
      "answers": [1, 3, 0, ...]     # 0/null = 미응답
    }
    """

    permission_classes = [IsAuthenticated]

    def post(self, request):
        s = SubmitSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            outcome = submit_assessment(
                get_uow(),
                student_id=request.user.id,
                category=data["category"],
                answers=data.get("answers") or [],
                target_id=data.get("target_id") or None,
                clock=get_homework_clock(),
                lock=get_submission_lock(),
            )
        except TargetRequiredError as e:
            return _error_response(e, drf_status.HTTP_400_BAD_REQUEST)
        except AnswerKeyNotFoundError as e:
            return _error_response(e, drf_status.HTTP_404_NOT_FOUND)
        except AssessmentConfigError as e:
            logger.error(
                "SUBMIT_CONFIG_ERROR student=%s category=%s code=%s: %s",
                request.user.id, data["category"], e.code, e,
            )
            return _error_response(e, drf_status.HTTP_500_INTERNAL_SERVER_ERROR)

        if not outcome.ok:
            return _rejected_response(outcome.message, outcome.code)

        return Response(outcome.value.to_dict(), status=drf_status.HTTP_201_CREATED)


class SubmissionAttemptListView(ListAPIView):
    """
    GET /assessments/attempts/

    본인 제출 기록만.
    """

    serializer_class = SubmissionAttemptSerializer
    permission_classes = [IsAuthenticated]

    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = SubmissionAttemptFilter
    ordering_fields = ["logical_date", "submitted_at", "score", "id"]
    ordering = ["-logical_date", "-submitted_at", "-id"]

    def get_queryset(self):
        return SubmissionAttempt.objects.filter(student_id=self.request.user.id)
