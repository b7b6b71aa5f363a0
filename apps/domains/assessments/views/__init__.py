# PATH: apps/domains/assessments/views/__init__.py

from .answer_key_viewset import AnswerKeyViewSet
from .report_views import MissedHomeworkView, StudentReportView, TodayStatusView
from .submission_views import GateView, SubmissionAttemptListView, SubmitView

__all__ = [
    "AnswerKeyViewSet",
    "GateView",
    "MissedHomeworkView",
    "StudentReportView",
    "SubmissionAttemptListView",
    "SubmitView",
    "TodayStatusView",
]
