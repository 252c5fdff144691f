"""Start/end intervals used by courses and events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from ..common.datetime_utils import now_local
from ..core.exceptions import InvalidRangeError


@dataclass(frozen=True)
class TimeRange:
    start_at: datetime
    end_at: datetime

    def __post_init__(self):
        if self.end_at <= self.start_at:
            raise InvalidRangeError("end_at must be after start_at")

    @property
    def present(self) -> bool:
        return True

    @property
    def duration(self) -> timedelta:
        return self.end_at - self.start_at

    @property
    def duration_days(self) -> float:
        return self.duration.total_seconds() / (24 * 60 * 60)

    def active(self, at: Optional[datetime] = None) -> bool:
        """Inclusive on both ends."""
        at = at or now_local(self.start_at.tzinfo)
        return self.start_at <= at <= self.end_at

    def upcoming(self, at: Optional[datetime] = None) -> bool:
        at = at or now_local(self.start_at.tzinfo)
        return self.start_at > at

    def ended(self, at: Optional[datetime] = None) -> bool:
        at = at or now_local(self.start_at.tzinfo)
        return self.end_at < at

    def overlaps(self, other: "AnyTimeRange") -> bool:
        if not other.present:
            return False
        return self.start_at < other.end_at and self.end_at > other.start_at

    def contains(self, moment: datetime) -> bool:
        return self.start_at <= moment <= self.end_at


@dataclass(frozen=True)
class NullTimeRange:
    """Undefined range: never active, upcoming, ended or overlapping."""

    start_at = None
    end_at = None

    @property
    def present(self) -> bool:
        return False

    @property
    def duration(self) -> timedelta:
        return timedelta(0)

    @property
    def duration_days(self) -> float:
        return 0.0

    def active(self, at: Optional[datetime] = None) -> bool:
        return False

    def upcoming(self, at: Optional[datetime] = None) -> bool:
        return False

    def ended(self, at: Optional[datetime] = None) -> bool:
        return False

    def overlaps(self, other: "AnyTimeRange") -> bool:
        return False

    def contains(self, moment: datetime) -> bool:
        return False


AnyTimeRange = Union[TimeRange, NullTimeRange]


def time_range_from(start_at: Optional[datetime], end_at: Optional[datetime]) -> AnyTimeRange:
    if start_at is None or end_at is None:
        return NullTimeRange()
    return TimeRange(start_at=start_at, end_at=end_at)
