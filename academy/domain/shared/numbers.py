"""
도메인 공통: 반올림 (외부 라이브러리 없음)
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence, Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    """0.5는 올림 (파이썬 round()의 banker's rounding 대신)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percent(part: int, whole: int) -> int:
    """part / whole * 100 을 한 번만 반올림. whole <= 0 이면 ValueError."""
    if whole <= 0:
        raise ValueError("whole must be positive")
    return int(
        (Decimal(int(part)) * 100 / Decimal(int(whole))).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
    )


def mean(values: Sequence[Number]) -> float:
    return float(sum(values)) / len(values)
