from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional

from .model import Attendance


class AttendanceRegister:
    """Which accounts attended which events of a course, for O(1) lookups."""

    def __init__(self, attendances: Iterable[Attendance]):
        index: dict[int, set] = defaultdict(set)
        for a in attendances:
            index[a.account_id].add(a.event_id)
        self._index = {account_id: frozenset(events) for account_id, events in index.items()}

    def attended(self, account_id: int, event_id: Optional[int]) -> bool:
        return event_id in self._index.get(account_id, frozenset())

    def events_for(self, account_id: int) -> frozenset:
        return self._index.get(account_id, frozenset())
