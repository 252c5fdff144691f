from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...core.enums import EligibilityFailure
from ...courses.model import Event, Location
from ..model import Attendance


class EligibilityCriterion(ABC):
    """Strategy Pattern: one rule a check-in attempt must satisfy.

    A criterion that has nothing to check against (no time range, no
    coordinates) is satisfied.
    """

    failure: EligibilityFailure

    @abstractmethod
    def satisfied(
        self,
        *,
        attendance: Attendance,
        event: Event,
        location: Optional[Location],
        time: datetime,
    ) -> bool:
        raise NotImplementedError
