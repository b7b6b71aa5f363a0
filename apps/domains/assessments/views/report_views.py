# PATH: apps/domains/assessments/views/report_views.py
"""
학생 리포트 / 숙제 현황 API (읽기 전용)

Endpoint:
- GET /assessments/today/
- GET /assessments/report/
- GET /assessments/missed/?days=7
"""

from __future__ import annotations

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.application.use_cases.assessment.student_report import (
    build_student_report,
    missed_homework,
    today_status,
)
from apps.domains.assessments.serializers import MissedQuerySerializer
from apps.domains.assessments.services import (
    get_homework_clock,
    get_report_history_limit,
    get_uow,
)


class TodayStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(
            today_status(
                get_uow(),
                student_id=request.user.id,
                clock=get_homework_clock(),
            )
        )


class StudentReportView(APIView):
    """
    카테고리별 평균/추이/취약 문항 + 주간/월간 숙제 이행률 + 학습 제안
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(
            build_student_report(
                get_uow(),
                student_id=request.user.id,
                history_limit=get_report_history_limit(),
                clock=get_homework_clock(),
            )
        )


class MissedHomeworkView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        q = MissedQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)

        result = missed_homework(
            get_uow(),
            student_id=request.user.id,
            days=q.validated_data["days"],
            clock=get_homework_clock(),
        )
        return Response(result.to_dict())
