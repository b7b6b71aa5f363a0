# PATH: apps/domains/assessments/urls.py
# 역할: assessments 라우팅 (학생 제출/리포트 + 정답 관리)

"""
Assessments URLs

✅ 라우팅
- student:
    - GET  /assessments/gate/?category=&target_id=
    - GET  /assessments/today/
    - POST /assessments/submit/
    - GET  /assessments/attempts/
    - GET  /assessments/report/
    - GET  /assessments/missed/?days=7
- staff:
    - /assessments/answer-keys/  (CRUD, 참조된 정답 수정 시 409 LOCKED)
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from apps.domains.assessments.views import (
    AnswerKeyViewSet,
    GateView,
    MissedHomeworkView,
    StudentReportView,
    SubmissionAttemptListView,
    SubmitView,
    TodayStatusView,
)

router = DefaultRouter()
router.register("answer-keys", AnswerKeyViewSet, basename="assessment-answer-keys")

urlpatterns = [
    path("gate/", GateView.as_view(), name="assessment-gate"),
    path("today/", TodayStatusView.as_view(), name="assessment-today"),
    path("submit/", SubmitView.as_view(), name="assessment-submit"),
    path("attempts/", SubmissionAttemptListView.as_view(), name="assessment-attempts"),
    path("report/", StudentReportView.as_view(), name="assessment-report"),
    path("missed/", MissedHomeworkView.as_view(), name="assessment-missed"),
    path("", include(router.urls)),
]
