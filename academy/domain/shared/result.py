"""
도메인 공통: Use Case 결과 타입 (외부 라이브러리 없음)

정상 흐름의 거절(마감/중복 등)은 예외가 아니라 Err 값으로 돌려준다.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    message: str
    code: str = "error"

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Err
