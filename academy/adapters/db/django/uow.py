"""
Django Unit of Work — transaction.atomic 래퍼 (lazy import)
"""
from __future__ import annotations


class DjangoUnitOfWork:
    """Django transaction.atomic으로 트랜잭션 경계. 메서드 내부에서 Django import."""

    def __init__(self) -> None:
        self._atomic = None
        self._attempts = None
        self._answer_keys = None
        self._calendar = None

    @property
    def attempts(self):
        from academy.adapters.db.django.repositories_assessment import (
            DjangoSubmissionAttemptRepository,
        )
        if self._attempts is None:
            self._attempts = DjangoSubmissionAttemptRepository()
        return self._attempts

    @property
    def answer_keys(self):
        from academy.adapters.db.django.repositories_assessment import DjangoAnswerKeyRepository
        if self._answer_keys is None:
            self._answer_keys = DjangoAnswerKeyRepository()
        return self._answer_keys

    @property
    def calendar(self):
        from academy.adapters.db.django.repositories_assessment import (
            DjangoHomeworkCalendarRepository,
        )
        if self._calendar is None:
            self._calendar = DjangoHomeworkCalendarRepository()
        return self._calendar

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import transaction
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomic is not None:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None

    def commit(self) -> None:
        # atomic() 블록 내에서는 명시적 commit 없음; __exit__ 시 자동
        pass

    def rollback(self) -> None:
        from django.db import transaction
        transaction.set_rollback(True)
