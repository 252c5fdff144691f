from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.constants import MAX_DISTANCE_KM
from ...core.enums import EligibilityFailure
from ...courses.model import Event, Location
from ..model import Attendance
from .base import EligibilityCriterion


@dataclass(frozen=True)
class ProximityCriterion(EligibilityCriterion):
    """The check-in must be within ``max_distance_km`` of the event location."""

    max_distance_km: float = MAX_DISTANCE_KM
    failure = EligibilityFailure.PROXIMITY

    def satisfied(self, *, attendance: Attendance, event: Event, location: Optional[Location], time: datetime) -> bool:
        if location is None or not location.has_coordinates:
            return True
        return attendance.within_range(location, max_distance_km=self.max_distance_km)
