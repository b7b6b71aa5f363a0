"""
숙제 날짜(logical day) 계산 — 순수 파이썬

✅ 규칙
- 고정 UTC 오프셋(기본 +9, KST)으로 현지 시각 변환 (DST 없음)
- 현지 시각이 cutover(기본 새벽 3시) "미만"이면 전날 숙제로 본다
- 마감 = 숙제 날짜 다음날 cutover 시각
- 현재 시각은 항상 인자로 받는다 (전역 시계 읽기 금지)
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import List

DEFAULT_CUTOVER_HOUR = 3
DEFAULT_UTC_OFFSET_HOURS = 9

CLOSED_LABEL = "마감됨"


@dataclass(frozen=True)
class HomeworkClock:
    cutover_hour: int = DEFAULT_CUTOVER_HOUR
    utc_offset_hours: int = DEFAULT_UTC_OFFSET_HOURS

    def __post_init__(self) -> None:
        if not 0 <= int(self.cutover_hour) <= 23:
            raise ValueError(f"cutover_hour must be 0..23: {self.cutover_hour}")

    @property
    def tz(self) -> timezone:
        return timezone(timedelta(hours=self.utc_offset_hours))

    def to_local(self, timestamp: datetime) -> datetime:
        # naive datetime은 UTC로 간주
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp.astimezone(self.tz)

    def logical_date(self, timestamp: datetime) -> date:
        local = self.to_local(timestamp)
        if local.hour < self.cutover_hour:
            return local.date() - timedelta(days=1)
        return local.date()

    def deadline(self, logical_date: date) -> datetime:
        next_day = logical_date + timedelta(days=1)
        return datetime(
            next_day.year,
            next_day.month,
            next_day.day,
            self.cutover_hour,
            tzinfo=self.tz,
        )

    def is_before_deadline(self, logical_date: date, now: datetime) -> bool:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now < self.deadline(logical_date)

    # -----------------------------------------------------
    # 표시용
    # -----------------------------------------------------

    def time_remaining(self, logical_date: date, now: datetime) -> str:
        """마감까지 남은 시간 ("5시간 30분" / "12분" / "마감됨")."""
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        diff = int((self.deadline(logical_date) - now).total_seconds())
        if diff <= 0:
            return CLOSED_LABEL

        hours = diff // 3600
        minutes = (diff % 3600) // 60
        if hours > 0:
            return f"{hours}시간 {minutes}분"
        return f"{minutes}분"

    def format_deadline(self, logical_date: date, now: datetime) -> str:
        """마감 시각 한국어 표기 ("오늘 새벽 3시" / "내일 새벽 3시" / "3/15 새벽 3시")."""
        deadline_local = self.deadline(logical_date)
        today_local = self.to_local(now).date()
        hour_label = f"새벽 {self.cutover_hour}시"

        if deadline_local.date() == today_local:
            return f"오늘 {hour_label}"
        if deadline_local.date() == today_local + timedelta(days=1):
            return f"내일 {hour_label}"
        return f"{deadline_local.month}/{deadline_local.day} {hour_label}"

    def recent_logical_dates(self, now: datetime, days: int) -> List[date]:
        """오늘 숙제 날짜 이전 N일 (오늘 제외, 최신순)."""
        today = self.logical_date(now)
        return [today - timedelta(days=i) for i in range(1, int(days) + 1)]


DEFAULT_CLOCK = HomeworkClock()


def logical_date(timestamp: datetime, clock: HomeworkClock = DEFAULT_CLOCK) -> date:
    return clock.logical_date(timestamp)


def deadline(logical_day: date, clock: HomeworkClock = DEFAULT_CLOCK) -> datetime:
    return clock.deadline(logical_day)


def is_before_deadline(
    logical_day: date,
    now: datetime,
    clock: HomeworkClock = DEFAULT_CLOCK,
) -> bool:
    return clock.is_before_deadline(logical_day, now)
