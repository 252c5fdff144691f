from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp (``2026-02-01T08:00:00``) into datetime."""
    return datetime.fromisoformat(value)


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current time; naive local time unless ``tz`` is given.

    Pass the tzinfo of the bounds being compared against, so aware and naive
    datetimes are never mixed.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)
