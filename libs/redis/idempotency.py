"""
Redis 기반 제출 락 (중복 클릭 방지)

submit 직전에 SETNX 락을 건다.
- 키: assessment:submit:{student}:{category}:{target_key}:{date}:lock
- TTL: 짧게 (기본 10초). 요청 도중 프로세스가 죽어도 자동 해제
- SETNX 실패 시 동시 제출로 간주 → "already submitted today"
- 저장 완료/실패 시 명시적 DEL
- Redis 미사용/장애 시 항상 획득 성공 (DB 유니크 제약이 최종 방어)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import redis

from libs.redis.client import get_redis_client

logger = logging.getLogger(__name__)

# 락 로그 포맷 (표준화)
LOG_LOCK_SKIP = "SUBMIT_LOCK key=%s reason=concurrent"
LOG_LOCK_ACQUIRED = "SUBMIT_LOCK key=%s acquired"
LOG_LOCK_RELEASED = "SUBMIT_LOCK key=%s released"

DEFAULT_LOCK_TTL_SECONDS = 10


class RedisSubmissionLock:
    """SubmissionLockPort 구현."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_LOCK_TTL_SECONDS,
        client_factory: Callable[[], Optional[redis.Redis]] = get_redis_client,
    ) -> None:
        self.ttl_seconds = int(ttl_seconds)
        self._client_factory = client_factory

    @staticmethod
    def _key(key: str) -> str:
        return f"{key}:lock"

    def acquire(self, key: str) -> bool:
        """
        Returns:
            True: 락 획득 성공 또는 Redis 미사용 → 진행
            False: 다른 요청이 같은 키를 처리 중
        """
        client = self._client_factory()
        if not client:
            return True

        try:
            # SET key value NX EX ttl
            ok = client.set(self._key(key), "1", nx=True, ex=self.ttl_seconds)
        except redis.RedisError as e:
            logger.warning("Redis submit lock acquire failed, allowing submit: %s", e)
            return True

        if ok:
            logger.debug(LOG_LOCK_ACQUIRED, key)
            return True
        logger.info(LOG_LOCK_SKIP, key)
        return False

    def release(self, key: str) -> None:
        client = self._client_factory()
        if not client:
            return

        try:
            client.delete(self._key(key))
            logger.debug(LOG_LOCK_RELEASED, key)
        except redis.RedisError as e:
            # TTL 만료 시 자동 해제되므로 치명적이지 않음
            logger.warning("Redis submit lock release failed: %s", e)
