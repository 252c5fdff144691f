from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..courses.model import Location
from ..shared.geo_location import AnyGeoLocation, geo_location_from


@dataclass(frozen=True)
class Attendance:
    """Domain entity: a check-in of an account for a course event."""

    id: Optional[int]
    account_id: int
    course_id: int
    event_id: Optional[int] = None
    name: Optional[str] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    created_at: Optional[datetime] = None

    @property
    def check_in_location(self) -> AnyGeoLocation:
        return geo_location_from(self.longitude, self.latitude)

    @property
    def has_coordinates(self) -> bool:
        return self.check_in_location.present

    def distance_to_event(self, event_location: Location) -> float:
        """Kilometers to the event's location; infinite when either side lacks coordinates."""
        return self.check_in_location.distance_to(event_location.geo_location)

    def within_range(self, event_location: Location, *, max_distance_km: float) -> bool:
        return self.distance_to_event(event_location) <= max_distance_km


@dataclass(frozen=True)
class ActiveEventDetails:
    """Read-model for the "what can I check in to right now" listing."""

    id: int
    course_id: int
    location_id: int
    name: str
    start_at: Optional[datetime]
    end_at: Optional[datetime]
    course_name: Optional[str]
    location_name: Optional[str]
    longitude: Optional[float]
    latitude: Optional[float]
    user_attendance_status: bool

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "course_id": self.course_id,
            "location_id": self.location_id,
            "name": self.name,
            "start_at": self.start_at.isoformat() if self.start_at else None,
            "end_at": self.end_at.isoformat() if self.end_at else None,
            "course_name": self.course_name,
            "location_name": self.location_name,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "user_attendance_status": self.user_attendance_status,
        }
