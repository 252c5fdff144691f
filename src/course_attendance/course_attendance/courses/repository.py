from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Course, Enrollment, Event, Location


class CourseRepository(Protocol):
    def get_by_id(self, course_id: int) -> Optional[Course]:
        raise NotImplementedError

    def find_full(self, course_id: int) -> Optional[Course]:
        """Course with events, locations and enrollments loaded."""

        raise NotImplementedError

    def find_ids(self, course_ids: Sequence[int]) -> dict[int, Course]:
        raise NotImplementedError

    def find_enrollment(self, *, account_id: int, course_id: int) -> Optional[Enrollment]:
        raise NotImplementedError

    def course_ids_for_account(self, account_id: int) -> Sequence[int]:
        raise NotImplementedError


class EventRepository(Protocol):
    def get_by_id(self, event_id: int) -> Optional[Event]:
        raise NotImplementedError

    def find_active_at(self, course_ids: Sequence[int], at: datetime) -> Sequence[Event]:
        raise NotImplementedError


class LocationRepository(Protocol):
    def get_by_id(self, location_id: int) -> Optional[Location]:
        raise NotImplementedError

    def find_ids(self, location_ids: Sequence[int]) -> dict[int, Location]:
        raise NotImplementedError
