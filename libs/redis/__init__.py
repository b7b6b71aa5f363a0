"""
Redis 보호 레이어

DB 유니크 제약이 단일 진실. Redis는 "짧은 중복 클릭 방지" 목적으로만 사용.

- 제출 락 (같은 학생/카테고리/날짜 동시 제출 직렬화)

Redis 미설정/장애 시 락 없이 진행 (DB 제약이 최종 방어).
"""

from libs.redis.client import get_redis_client
from libs.redis.idempotency import RedisSubmissionLock

__all__ = [
    "get_redis_client",
    "RedisSubmissionLock",
]
