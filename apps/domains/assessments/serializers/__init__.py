# PATH: apps/domains/assessments/serializers/__init__.py

from .answer_key_serializer import AnswerKeySerializer
from .submission_serializer import (
    GateQuerySerializer,
    MissedQuerySerializer,
    SubmissionAttemptSerializer,
    SubmitSerializer,
)

__all__ = [
    "AnswerKeySerializer",
    "GateQuerySerializer",
    "MissedQuerySerializer",
    "SubmissionAttemptSerializer",
    "SubmitSerializer",
]
