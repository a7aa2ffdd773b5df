"""DayWindow value object — immutable [start, end) range of one calendar day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo


@dataclass(frozen=True)
class DayWindow:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("DayWindow end must be after start")

    @classmethod
    def for_instant(cls, now: datetime, tz: tzinfo | None = None) -> DayWindow:
        """Build the calendar day containing *now*.

        If *tz* is given, *now* is converted first so the day boundaries are
        local midnights of that zone. The end is the next midnight (exclusive),
        which covers 00:00:00.000 up to and including 23:59:59.999.
        """
        local = now.astimezone(tz) if tz is not None else now
        start = local.replace(hour=0, minute=0, second=0, microsecond=0)
        return cls(start=start, end=start + timedelta(days=1))

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end
