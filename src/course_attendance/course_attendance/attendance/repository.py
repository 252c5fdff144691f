from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Attendance


class AttendanceRepository(Protocol):
    def create(self, attendance: Attendance) -> Attendance:
        """Persist a new check-in and return it with ``id``/``created_at`` set."""

        raise NotImplementedError

    def find_by_course(self, course_id: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def find_by_event(self, event_id: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def find_by_account_course(self, account_id: int, course_id: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def find_for_account_and_event(self, *, account_id: int, event_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def find_attended_event_ids(self, account_id: int, event_ids: Sequence[int]) -> set[int]:
        raise NotImplementedError
