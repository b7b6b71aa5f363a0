from academy.application.ports.unit_of_work import UnitOfWork
from academy.application.ports.assessment import (
    AnswerKeyRepository,
    DuplicateSubmissionError,
    HomeworkCalendarRepository,
    SubmissionAttemptRepository,
    SubmissionLockPort,
)

__all__ = [
    "UnitOfWork",
    "AnswerKeyRepository",
    "DuplicateSubmissionError",
    "HomeworkCalendarRepository",
    "SubmissionAttemptRepository",
    "SubmissionLockPort",
]
