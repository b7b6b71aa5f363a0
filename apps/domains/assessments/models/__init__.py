# PATH: apps/domains/assessments/models/__init__.py

from .answer_key import AnswerKey
from .homework_assignment_day import HomeworkAssignmentDay
from .submission_attempt import SubmissionAttempt

__all__ = [
    "AnswerKey",
    "HomeworkAssignmentDay",
    "SubmissionAttempt",
]
