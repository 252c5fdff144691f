from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import cached_property
from typing import Sequence

from ..common.datetime_utils import now_local
from ..courses.model import Course, Enrollment, Event
from .model import Attendance
from .register import AttendanceRegister


@dataclass(frozen=True)
class ReportEvent:
    id: int
    name: str


class StudentAttendanceRecord:
    """One student's attendance statistics, computed on demand."""

    def __init__(self, *, enrollment: Enrollment, events: Sequence[Event], register: AttendanceRegister):
        self.email = enrollment.account_email
        self._account_id = enrollment.account_id
        self._events = list(events)
        self._register = register

    @cached_property
    def event_attendance(self) -> dict:
        """``{event_id: 1 | 0}`` in event order."""
        return {e.id: 1 if self._register.attended(self._account_id, e.id) else 0 for e in self._events}

    @property
    def attend_sum(self) -> int:
        return sum(self.event_attendance.values())

    @property
    def attend_percent(self) -> float:
        if not self._events:
            return 0.0
        return round(self.attend_sum / len(self._events) * 100, 2)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StudentAttendanceRecord):
            return NotImplemented
        return self.email == other.email and self.event_attendance == other.event_attendance

    def __hash__(self) -> int:
        return hash((self.email, tuple(self.event_attendance.items())))

    def __repr__(self) -> str:
        return f"StudentAttendanceRecord(email={self.email!r}, attend_sum={self.attend_sum})"


class AttendanceReport:
    """Per-student attendance report for a course.

    Events and students come from the course's loaded children; if either was
    not loaded the corresponding list is empty. All records share one register.
    """

    def __init__(self, *, course: Course, attendances: Sequence[Attendance]):
        self.course_name = course.name
        self.generated_at: datetime = now_local()
        self._course = course
        self._attendances = list(attendances)

    @cached_property
    def _course_events(self) -> list[Event]:
        if not self._course.events_loaded:
            return []
        return list(self._course.events)

    @cached_property
    def events(self) -> list[ReportEvent]:
        return [ReportEvent(id=e.id, name=e.name) for e in self._course_events]

    @cached_property
    def student_records(self) -> list[StudentAttendanceRecord]:
        if not self._course.enrollments_loaded:
            return []
        return [
            StudentAttendanceRecord(enrollment=enrollment, events=self._course_events, register=self._register)
            for enrollment in self._course.students
        ]

    @cached_property
    def _register(self) -> AttendanceRegister:
        return AttendanceRegister(self._attendances)

    def to_dict(self) -> dict:
        return {
            "course_name": self.course_name,
            "generated_at": self.generated_at.isoformat(),
            "events": [{"id": e.id, "name": e.name} for e in self.events],
            "student_records": [
                {
                    "email": r.email,
                    "attend_sum": r.attend_sum,
                    "attend_percent": r.attend_percent,
                    "event_attendance": r.event_attendance,
                }
                for r in self.student_records
            ],
        }


def build_report(course: Course, attendances: Sequence[Attendance]) -> AttendanceReport:
    return AttendanceReport(course=course, attendances=attendances)
