from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..accounts.model import Requestor
from ..common.coordinates import validate_coordinates
from ..common.validators import require_int_id
from ..core.exceptions import (
    AuthorizationError,
    EligibilityError,
    LocationRequiredError,
    NotFoundError,
    ValidationError,
)
from ..courses.model import Course, Enrollment, Event
from ..courses.repository import CourseRepository, EventRepository, LocationRepository
from ..policies.rules import can
from .eligibility import AttendanceEligibility
from .model import Attendance
from .report import AttendanceReport, build_report
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: record a check-in, list check-ins, build the course report."""

    def __init__(
        self,
        attendances: AttendanceRepository,
        courses: CourseRepository,
        events: EventRepository,
        locations: LocationRepository,
        *,
        eligibility: AttendanceEligibility | None = None,
        teaching_staff_exempt: bool = True,
    ):
        self._attendances = attendances
        self._courses = courses
        self._events = events
        self._locations = locations
        self._eligibility = eligibility or AttendanceEligibility()
        self._teaching_staff_exempt = bool(teaching_staff_exempt)

    def _get_course(self, course_id) -> Course:
        course_id = require_int_id(course_id, "course ID")
        course = self._courses.get_by_id(course_id)
        if not course:
            raise NotFoundError("Course not found")
        return course

    def _get_course_event(self, course: Course, event_id) -> Event:
        if event_id is None:
            raise ValidationError("Event ID is required")
        event = self._events.get_by_id(require_int_id(event_id, "event ID"))
        if not event:
            raise NotFoundError("Event not found")
        if event.course_id != course.id:
            raise ValidationError("Event does not belong to this course")
        return event

    def _authorize(self, requestor: Requestor, course: Course, action: str, message: str) -> Optional[Enrollment]:
        enrollment = self._courses.find_enrollment(account_id=requestor.account_id, course_id=course.id)
        if not can("attendance", action, requestor, enrollment=enrollment):
            raise AuthorizationError(message)
        return enrollment

    def record_attendance(
        self,
        requestor: Requestor,
        *,
        course_id,
        event_id,
        longitude=None,
        latitude=None,
        now: datetime | None = None,
    ) -> Attendance:
        course = self._get_course(course_id)
        enrollment = self._authorize(requestor, course, "create", "You have no access to record attendance")
        event = self._get_course_event(course, event_id)

        longitude, latitude = validate_coordinates(longitude, latitude)
        if longitude is None:
            raise LocationRequiredError("Location coordinates are required")

        if self._attendances.find_for_account_and_event(account_id=requestor.account_id, event_id=event.id):
            raise ValidationError("Attendance already recorded for this event")

        attendance = Attendance(
            id=None,
            account_id=requestor.account_id,
            course_id=course.id,
            event_id=event.id,
            name=f"{event.name} Attendance",
            longitude=longitude,
            latitude=latitude,
        )

        if not (self._teaching_staff_exempt and enrollment.teaching):
            location = self._locations.get_by_id(event.location_id)
            failure = self._eligibility.check(attendance=attendance, event=event, location=location, time=now)
            if failure is not None:
                logger.info(
                    "Rejected check-in account=%s event=%s reason=%s",
                    requestor.account_id,
                    event.id,
                    failure.value,
                )
                raise EligibilityError(failure)

        created = self._attendances.create(attendance)
        logger.info("Recorded check-in account=%s event=%s", requestor.account_id, event.id)
        return created

    def list_user_attendances(self, requestor: Requestor, *, course_id) -> Sequence[Attendance]:
        """The requestor's own check-ins for a course."""
        course = self._get_course(course_id)
        self._authorize(requestor, course, "view", "You have no access to view attendances")
        return list(self._attendances.find_by_account_course(requestor.account_id, course.id))

    def list_attendances_by_event(self, requestor: Requestor, *, course_id, event_id) -> Sequence[Attendance]:
        course = self._get_course(course_id)
        self._authorize(requestor, course, "view_all", "You have no access to view attendances")
        event = self._get_course_event(course, event_id)
        return list(self._attendances.find_by_event(event.id))

    def generate_report(self, requestor: Requestor, *, course_id) -> AttendanceReport:
        course = self._get_course(course_id)
        self._authorize(requestor, course, "view_all", "You have no access to generate report")

        full = self._courses.find_full(course.id)
        if not full:
            raise NotFoundError("Course not found")
        return build_report(full, self._attendances.find_by_course(course.id))
