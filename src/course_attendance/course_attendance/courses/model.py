from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.validators import require_email, require_name
from ..core.enums import CourseRole
from ..shared.geo_location import AnyGeoLocation, geo_location_from
from ..shared.loading import Collection, loaded_or_unloaded
from ..shared.time_range import AnyTimeRange, time_range_from
from .roles import CourseRoles


@dataclass(frozen=True)
class Enrollment:
    """Domain entity: an account's participation in a course.

    One account may hold several roles in the same course (e.g. staff + student).
    An enrollment without any role is not a genuine membership.
    """

    account_id: int
    course_id: int
    roles: CourseRoles = field(default_factory=CourseRoles)
    account_email: Optional[str] = None
    account_name: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.roles, CourseRoles):
            object.__setattr__(self, "roles", CourseRoles.from_names(self.roles))
        require_email(self.account_email)

    def has_role(self, role) -> bool:
        return self.roles.has(role)

    @property
    def owner(self) -> bool:
        return self.roles.owner

    @property
    def instructor(self) -> bool:
        return self.roles.instructor

    @property
    def staff(self) -> bool:
        return self.roles.staff

    @property
    def student(self) -> bool:
        return self.roles.student

    @property
    def teaching(self) -> bool:
        return self.roles.teaching

    @property
    def active(self) -> bool:
        return bool(self.roles)

    @property
    def display_name(self) -> Optional[str]:
        return self.account_name or self.account_email


@dataclass(frozen=True)
class Location:
    """Domain entity: a named place belonging to a course, optionally geo-tagged."""

    id: Optional[int]
    course_id: int
    name: str
    longitude: Optional[float] = None
    latitude: Optional[float] = None

    def __post_init__(self):
        require_name(self.name, "Location name")
        # rejects out-of-range coordinates eagerly
        self.geo_location

    @property
    def geo_location(self) -> AnyGeoLocation:
        return geo_location_from(self.longitude, self.latitude)

    @property
    def has_coordinates(self) -> bool:
        return self.geo_location.present

    def distance_to(self, other: "Location") -> float:
        return self.geo_location.distance_to(other.geo_location)


@dataclass(frozen=True)
class Event:
    """Domain entity: a scheduled session of a course held at a location."""

    id: Optional[int]
    course_id: int
    location_id: int
    name: str
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None

    def __post_init__(self):
        require_name(self.name, "Event name")
        # rejects end_at <= start_at eagerly
        self.time_range

    @property
    def time_range(self) -> AnyTimeRange:
        return time_range_from(self.start_at, self.end_at)

    @property
    def duration(self):
        return self.time_range.duration

    def active(self, at: Optional[datetime] = None) -> bool:
        return self.time_range.active(at)

    def upcoming(self, at: Optional[datetime] = None) -> bool:
        return self.time_range.upcoming(at)

    def ended(self, at: Optional[datetime] = None) -> bool:
        return self.time_range.ended(at)


@dataclass(frozen=True)
class Course:
    """Aggregate root: a course with its events, locations and enrollments.

    Children passed as ``None`` stay unloaded, and queries on them raise
    ``NotLoadedError``. An empty list means loaded but empty.
    """

    id: Optional[int]
    name: str
    logo: Optional[str] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    events: Collection = None
    locations: Collection = None
    enrollments: Collection = None

    def __post_init__(self):
        require_name(self.name, "Course name")
        self.time_range
        object.__setattr__(self, "events", loaded_or_unloaded(self.events, "Events"))
        object.__setattr__(self, "locations", loaded_or_unloaded(self.locations, "Locations"))
        object.__setattr__(self, "enrollments", loaded_or_unloaded(self.enrollments, "Enrollments"))

    @property
    def time_range(self) -> AnyTimeRange:
        return time_range_from(self.start_at, self.end_at)

    def active(self, at: Optional[datetime] = None) -> bool:
        return self.time_range.active(at)

    def upcoming(self, at: Optional[datetime] = None) -> bool:
        return self.time_range.upcoming(at)

    def ended(self, at: Optional[datetime] = None) -> bool:
        return self.time_range.ended(at)

    @property
    def events_loaded(self) -> bool:
        return self.events.loaded

    @property
    def locations_loaded(self) -> bool:
        return self.locations.loaded

    @property
    def enrollments_loaded(self) -> bool:
        return self.enrollments.loaded

    def find_event(self, event_id: int) -> Optional[Event]:
        return self.events.find(lambda e: e.id == event_id)

    def find_location(self, location_id: int) -> Optional[Location]:
        return self.locations.find(lambda loc: loc.id == location_id)

    def find_enrollment(self, account_id: int) -> Optional[Enrollment]:
        return self.enrollments.find(lambda e: e.account_id == account_id)

    @property
    def event_count(self) -> int:
        return len(self.events)

    @property
    def location_count(self) -> int:
        return len(self.locations)

    @property
    def enrollment_count(self) -> int:
        return len(self.enrollments)

    def enrollments_with_role(self, role: CourseRole) -> list[Enrollment]:
        return self.enrollments.select(lambda e: e.has_role(role))

    @property
    def teaching_staff(self) -> list[Enrollment]:
        return self.enrollments.select(lambda e: e.teaching)

    @property
    def students(self) -> list[Enrollment]:
        return self.enrollments.select(lambda e: e.student)
