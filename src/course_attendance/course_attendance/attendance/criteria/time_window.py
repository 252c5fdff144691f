from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import EligibilityFailure
from ...courses.model import Event, Location
from ..model import Attendance
from .base import EligibilityCriterion


class TimeWindowCriterion(EligibilityCriterion):
    """The event must be running at check-in time (both ends inclusive)."""

    failure = EligibilityFailure.TIME_WINDOW

    def satisfied(self, *, attendance: Attendance, event: Event, location: Optional[Location], time: datetime) -> bool:
        if not event.time_range.present:
            return True
        return event.active(at=time)
