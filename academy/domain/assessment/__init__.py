from academy.domain.assessment.categories import (
    AssessmentCategory,
    ScoringRule,
    index_for_question,
    question_number,
)
from academy.domain.assessment.clock import HomeworkClock
from academy.domain.assessment.entities import (
    NO_ANSWER,
    AnswerKey,
    CompletionRate,
    GradedResult,
    QuestionDetail,
    SubmissionAttempt,
    Trend,
    WeakPoint,
)
from academy.domain.assessment.gate import GateDecision, can_submit
from academy.domain.assessment.grader import grade

__all__ = [
    "AssessmentCategory",
    "ScoringRule",
    "index_for_question",
    "question_number",
    "HomeworkClock",
    "NO_ANSWER",
    "AnswerKey",
    "CompletionRate",
    "GradedResult",
    "QuestionDetail",
    "SubmissionAttempt",
    "Trend",
    "WeakPoint",
    "GateDecision",
    "can_submit",
    "grade",
]
