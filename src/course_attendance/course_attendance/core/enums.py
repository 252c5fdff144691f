from __future__ import annotations

from enum import Enum


class SystemRole(str, Enum):
    """Account-level roles used for system-wide permissions."""

    ADMIN = "admin"
    CREATOR = "creator"
    MEMBER = "member"


class CourseRole(str, Enum):
    """Per-course roles held through an enrollment."""

    OWNER = "owner"
    INSTRUCTOR = "instructor"
    STAFF = "staff"
    STUDENT = "student"


TEACHING_ROLES = frozenset({CourseRole.OWNER, CourseRole.INSTRUCTOR, CourseRole.STAFF})


class EligibilityFailure(str, Enum):
    """Why a check-in attempt was rejected."""

    TIME_WINDOW = "time_window"
    PROXIMITY = "proximity"
