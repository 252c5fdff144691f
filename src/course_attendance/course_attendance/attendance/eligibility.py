"""Attendance eligibility: right place, right time.

The rules say nothing about *who* checks in. Whether a given requestor must
satisfy them is decided by the calling service.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import MAX_DISTANCE_KM
from ..core.enums import EligibilityFailure
from ..courses.model import Event, Location
from .criteria.base import EligibilityCriterion
from .criteria.proximity import ProximityCriterion
from .criteria.time_window import TimeWindowCriterion
from .model import Attendance


@dataclass(frozen=True)
class AttendanceEligibility:
    """Evaluates criteria in order; the first one that fails decides the verdict."""

    criteria: Sequence[EligibilityCriterion] = (
        TimeWindowCriterion(),
        ProximityCriterion(max_distance_km=MAX_DISTANCE_KM),
    )

    def check(
        self,
        *,
        attendance: Attendance,
        event: Event,
        location: Optional[Location],
        time: Optional[datetime] = None,
    ) -> Optional[EligibilityFailure]:
        time = time or now_local(event.start_at.tzinfo if event.start_at else None)
        for criterion in self.criteria:
            if not criterion.satisfied(attendance=attendance, event=event, location=location, time=time):
                return criterion.failure
        return None


_DEFAULT = AttendanceEligibility()


def check_eligibility(
    attendance: Attendance,
    event: Event,
    location: Optional[Location],
    time: Optional[datetime] = None,
) -> Optional[EligibilityFailure]:
    """``None`` when eligible, otherwise the failing criterion."""
    return _DEFAULT.check(attendance=attendance, event=event, location=location, time=time)
