"""
제출 락용 Redis 클라이언트

- REDIS_HOST 미설정 → None (락 없이 진행, DB 유니크 제약이 최종 방어)
- 연결은 첫 명령 시점에 맺는다. 장애는 RedisSubmissionLock이 명령 단위로 흡수
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

import redis

logger = logging.getLogger(__name__)

# 제출 요청을 오래 붙잡지 않도록 짧게
SOCKET_TIMEOUT_SECONDS = 2


@lru_cache(maxsize=1)
def get_redis_client() -> Optional[redis.Redis]:
    host = os.getenv("REDIS_HOST")
    if not host:
        logger.debug("REDIS_HOST not set, submit lock disabled")
        return None

    return redis.Redis(
        host=host,
        port=int(os.getenv("REDIS_PORT", "6379")),
        password=os.getenv("REDIS_PASSWORD") or None,
        db=int(os.getenv("REDIS_DB", "0")),
        socket_timeout=SOCKET_TIMEOUT_SECONDS,
        socket_connect_timeout=SOCKET_TIMEOUT_SECONDS,
    )
