from __future__ import annotations

import pytest

from libs.redis import client as redis_client
from tests.fakes import InMemoryUnitOfWork, RecordingLock


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


@pytest.fixture
def lock() -> RecordingLock:
    return RecordingLock()


@pytest.fixture(autouse=True)
def redis_disabled(monkeypatch: pytest.MonkeyPatch):
    """REDIS_HOST 미설정 상태에서 시작 (제출 락은 no-op)."""
    monkeypatch.delenv("REDIS_HOST", raising=False)
    redis_client.get_redis_client.cache_clear()
    yield
    redis_client.get_redis_client.cache_clear()
