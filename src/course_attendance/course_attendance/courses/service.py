from __future__ import annotations

from datetime import datetime

from ..accounts.model import Requestor
from ..attendance.model import ActiveEventDetails
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..common.validators import require_int_id
from ..core.enums import CourseRole
from ..core.exceptions import AuthorizationError, NotFoundError
from ..policies.rules import can
from . import role_assignment
from .repository import CourseRepository, EventRepository, LocationRepository


class CourseService:
    """Use case: which roles may the requestor assign in a course."""

    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def assignable_roles(self, requestor: Requestor, *, course_id) -> list[CourseRole]:
        course_id = require_int_id(course_id, "course ID")
        if not self._courses.get_by_id(course_id):
            raise NotFoundError("Course not found")

        enrollment = self._courses.find_enrollment(account_id=requestor.account_id, course_id=course_id)
        if not can("course", "view", requestor, enrollment=enrollment):
            raise AuthorizationError("You have no access to this course")
        return role_assignment.for_enrollment(enrollment.roles)


class EventService:
    """Use case: events running now across the requestor's courses."""

    def __init__(
        self,
        events: EventRepository,
        locations: LocationRepository,
        courses: CourseRepository,
        attendances: AttendanceRepository,
    ):
        self._events = events
        self._locations = locations
        self._courses = courses
        self._attendances = attendances

    def find_active_events(self, requestor: Requestor, *, at: datetime | None = None) -> list[ActiveEventDetails]:
        at = at or now_local()

        course_ids = list(self._courses.course_ids_for_account(requestor.account_id))
        if not course_ids:
            return []

        events = [e for e in self._events.find_active_at(course_ids, at) if e.active(at=at)]
        if not events:
            return []

        locations = self._locations.find_ids(sorted({e.location_id for e in events}))
        courses = self._courses.find_ids(sorted({e.course_id for e in events}))
        attended = self._attendances.find_attended_event_ids(requestor.account_id, [e.id for e in events])

        out = []
        for e in events:
            location = locations.get(e.location_id)
            course = courses.get(e.course_id)
            out.append(
                ActiveEventDetails(
                    id=e.id,
                    course_id=e.course_id,
                    location_id=e.location_id,
                    name=e.name,
                    start_at=e.start_at,
                    end_at=e.end_at,
                    course_name=course.name if course else None,
                    location_name=location.name if location else None,
                    longitude=location.longitude if location else None,
                    latitude=location.latitude if location else None,
                    user_attendance_status=e.id in attended,
                )
            )
        return out
