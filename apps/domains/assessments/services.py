# PATH: apps/domains/assessments/services.py
"""
Django 설정 → 도메인/포트 조립

- 숙제 시계 (cutover / UTC offset)
- 제출 락 (Redis)
- Unit of Work
"""

from __future__ import annotations

from django.conf import settings

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.domain.assessment.clock import HomeworkClock
from libs.redis.idempotency import DEFAULT_LOCK_TTL_SECONDS, RedisSubmissionLock

DEFAULT_REPORT_HISTORY_LIMIT = 20


def get_homework_clock() -> HomeworkClock:
    return HomeworkClock(
        cutover_hour=int(getattr(settings, "HOMEWORK_CUTOVER_HOUR", 3)),
        utc_offset_hours=int(getattr(settings, "HOMEWORK_UTC_OFFSET_HOURS", 9)),
    )


def get_submission_lock() -> RedisSubmissionLock:
    return RedisSubmissionLock(
        ttl_seconds=int(
            getattr(settings, "ASSESSMENT_SUBMIT_LOCK_TTL_SECONDS", DEFAULT_LOCK_TTL_SECONDS)
        )
    )


def get_report_history_limit() -> int:
    return int(getattr(settings, "ASSESSMENT_REPORT_HISTORY_LIMIT", DEFAULT_REPORT_HISTORY_LIMIT))


def get_uow() -> DjangoUnitOfWork:
    return DjangoUnitOfWork()
