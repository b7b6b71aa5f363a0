"""
평가 저장소 — Django ORM 구현 (메서드 내부에서만 apps.domains.assessments import)
"""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence, Set

from academy.application.ports.assessment import DuplicateSubmissionError
from academy.domain.assessment.categories import AssessmentCategory, target_key_for
from academy.domain.assessment.entities import AnswerKey, GradedResult, SubmissionAttempt


def _attempt_to_entity(m) -> Optional[SubmissionAttempt]:
    if m is None:
        return None
    return SubmissionAttempt(
        id=m.id,
        student_id=m.student_id,
        category=AssessmentCategory(m.category),
        target_id=m.target_id or None,
        answers=tuple(int(a) for a in (m.answers or [])),
        submitted_at=m.submitted_at,
        logical_date=m.logical_date,
        score=m.score,
        correct_count=m.correct_count,
        question_count=m.question_count,
        details=list(m.details or []),
    )


def _answer_key_to_entity(m) -> Optional[AnswerKey]:
    if m is None:
        return None
    return AnswerKey.build(
        category=m.category,
        answers=m.answers or [],
        weighted_indices=m.weighted_indices,
        target_id=m.target_id or None,
    )


def _category_values(categories: Sequence[AssessmentCategory]) -> List[str]:
    return [AssessmentCategory.parse(c).value for c in categories]


def _group_dates(rows) -> Dict[AssessmentCategory, Set[date]]:
    out: Dict[AssessmentCategory, Set[date]] = defaultdict(set)
    for category, d in rows:
        out[AssessmentCategory(category)].add(d)
    return dict(out)


class DjangoSubmissionAttemptRepository:
    """SubmissionAttemptRepository 구현. 하루 1회 유일성은 DB UniqueConstraint가 최종 보장."""

    def exists(
        self,
        student_id: int,
        category: AssessmentCategory,
        target_key: str,
        logical_date: date,
    ) -> bool:
        from apps.domains.assessments.models import SubmissionAttempt as AttemptModel
        return AttemptModel.objects.filter(
            student_id=student_id,
            category=AssessmentCategory.parse(category).value,
            target_key=target_key or "",
            logical_date=logical_date,
        ).exists()

    def create(
        self,
        attempt: SubmissionAttempt,
        result: Optional[GradedResult],
        answer_key_id: Optional[int] = None,
    ) -> SubmissionAttempt:
        from django.db import IntegrityError, transaction
        from apps.domains.assessments.models import SubmissionAttempt as AttemptModel

        try:
            # savepoint: 바깥 트랜잭션을 깨뜨리지 않고 유니크 위반만 되돌린다
            with transaction.atomic():
                m = AttemptModel.objects.create(
                    student_id=attempt.student_id,
                    category=attempt.category.value,
                    target_id=attempt.target_id or "",
                    target_key=target_key_for(attempt.category, attempt.target_id),
                    logical_date=attempt.logical_date,
                    submitted_at=attempt.submitted_at,
                    answers=list(attempt.answers),
                    score=result.score if result else None,
                    max_score=result.max_score if result else None,
                    correct_count=result.correct_count if result else None,
                    question_count=result.question_count if result else None,
                    details=[d.to_dict() for d in result.details] if result else [],
                    answer_key_id=answer_key_id,
                )
        except IntegrityError as e:
            raise DuplicateSubmissionError(str(e)) from e

        return _attempt_to_entity(m)

    def recent(
        self,
        student_id: int,
        category: AssessmentCategory,
        limit: int,
    ) -> List[SubmissionAttempt]:
        from apps.domains.assessments.models import SubmissionAttempt as AttemptModel
        rows = list(
            AttemptModel.objects.filter(
                student_id=student_id,
                category=AssessmentCategory.parse(category).value,
            ).order_by("-logical_date", "-submitted_at", "-id")[: int(limit)]
        )
        rows.reverse()
        return [_attempt_to_entity(m) for m in rows]

    def submitted_dates(
        self,
        student_id: int,
        categories: Sequence[AssessmentCategory],
        start: date,
        end: date,
    ) -> Dict[AssessmentCategory, Set[date]]:
        from apps.domains.assessments.models import SubmissionAttempt as AttemptModel
        rows = (
            AttemptModel.objects.filter(
                student_id=student_id,
                category__in=_category_values(categories),
                logical_date__gte=start,
                logical_date__lte=end,
            )
            .values_list("category", "logical_date")
            .distinct()
        )
        return _group_dates(rows)


class DjangoAnswerKeyRepository:

    def _get_model(self, category: AssessmentCategory, target_id: Optional[str]):
        from apps.domains.assessments.models import AnswerKey as AnswerKeyModel
        return AnswerKeyModel.objects.filter(
            category=AssessmentCategory.parse(category).value,
            target_id=target_id or "",
        ).first()

    def get(self, category: AssessmentCategory, target_id: Optional[str]) -> Optional[AnswerKey]:
        return _answer_key_to_entity(self._get_model(category, target_id))

    def get_id(self, category: AssessmentCategory, target_id: Optional[str]) -> Optional[int]:
        m = self._get_model(category, target_id)
        return m.id if m is not None else None


class DjangoHomeworkCalendarRepository:

    def assigned_dates(
        self,
        student_id: int,
        categories: Sequence[AssessmentCategory],
        start: date,
        end: date,
    ) -> Dict[AssessmentCategory, Set[date]]:
        from apps.domains.assessments.models import HomeworkAssignmentDay
        rows = HomeworkAssignmentDay.objects.filter(
            student_id=student_id,
            category__in=_category_values(categories),
            homework_date__gte=start,
            homework_date__lte=end,
        ).values_list("category", "homework_date")
        return _group_dates(rows)
