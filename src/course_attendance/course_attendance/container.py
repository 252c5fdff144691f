from __future__ import annotations

from dataclasses import dataclass

from .attendance.eligibility import AttendanceEligibility
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .courses.repository import CourseRepository, EventRepository, LocationRepository
from .courses.service import CourseService, EventService


@dataclass(frozen=True)
class Container:
    courses_repo: CourseRepository
    events_repo: EventRepository
    locations_repo: LocationRepository
    attendances_repo: AttendanceRepository

    attendance_service: AttendanceService
    course_service: CourseService
    event_service: EventService


def build_container(
    *,
    courses: CourseRepository,
    events: EventRepository,
    locations: LocationRepository,
    attendances: AttendanceRepository,
    teaching_staff_exempt: bool = True,
) -> Container:
    """Wire services over repositories supplied by the persistence layer."""

    attendance_service = AttendanceService(
        attendances,
        courses,
        events,
        locations,
        eligibility=AttendanceEligibility(),
        teaching_staff_exempt=teaching_staff_exempt,
    )
    course_service = CourseService(courses)
    event_service = EventService(events, locations, courses, attendances)

    return Container(
        courses_repo=courses,
        events_repo=events,
        locations_repo=locations,
        attendances_repo=attendances,
        attendance_service=attendance_service,
        course_service=course_service,
        event_service=event_service,
    )
