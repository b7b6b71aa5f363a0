"""
평가 저장소 포트 — 영속화 추상화 (Django/ORM 미사용)
"""
from __future__ import annotations

from abc import abstractmethod
from datetime import date
from typing import List, Optional, Protocol, Sequence

from academy.domain.assessment.categories import AssessmentCategory
from academy.domain.assessment.entities import AnswerKey, GradedResult, SubmissionAttempt


class DuplicateSubmissionError(Exception):
    """저장소 유니크 제약이 같은 날 두 번째 insert를 거부함."""
    pass


class SubmissionAttemptRepository(Protocol):
    """제출 기록. 유니크 제약(student, category, target_key, logical_date)은 저장소 책임."""

    @abstractmethod
    def exists(
        self,
        student_id: int,
        category: AssessmentCategory,
        target_key: str,
        logical_date: date,
    ) -> bool:
        ...

    @abstractmethod
    def create(
        self,
        attempt: SubmissionAttempt,
        result: Optional[GradedResult],
        answer_key_id: Optional[int] = None,
    ) -> SubmissionAttempt:
        """제출 + 채점 스냅샷 저장. 중복이면 DuplicateSubmissionError."""
        ...

    @abstractmethod
    def recent(
        self,
        student_id: int,
        category: AssessmentCategory,
        limit: int,
    ) -> List[SubmissionAttempt]:
        """최근 N개 (오래된 것 → 최신 순)."""
        ...

    @abstractmethod
    def submitted_dates(
        self,
        student_id: int,
        categories: Sequence[AssessmentCategory],
        start: date,
        end: date,
    ) -> dict:
        """{category: set(logical_date)} — 기간 [start, end]."""
        ...


class AnswerKeyRepository(Protocol):

    @abstractmethod
    def get(self, category: AssessmentCategory, target_id: str) -> Optional[AnswerKey]:
        ...

    @abstractmethod
    def get_id(self, category: AssessmentCategory, target_id: str) -> Optional[int]:
        ...


class HomeworkCalendarRepository(Protocol):
    """숙제 배정 날짜 (이행률 분모)."""

    @abstractmethod
    def assigned_dates(
        self,
        student_id: int,
        categories: Sequence[AssessmentCategory],
        start: date,
        end: date,
    ) -> dict:
        """{category: set(homework_date)} — 기간 [start, end]."""
        ...


class SubmissionLockPort(Protocol):
    """짧은 중복 클릭 방지 락 (advisory). 실패해도 DB 제약이 최종 방어."""

    def acquire(self, key: str) -> bool:
        ...

    def release(self, key: str) -> None:
        ...
