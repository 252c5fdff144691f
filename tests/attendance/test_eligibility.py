from datetime import datetime, timedelta, timezone

import pytest

from src.course_attendance.course_attendance.attendance.criteria.proximity import ProximityCriterion
from src.course_attendance.course_attendance.attendance.criteria.time_window import TimeWindowCriterion
from src.course_attendance.course_attendance.attendance.eligibility import AttendanceEligibility, check_eligibility
from src.course_attendance.course_attendance.attendance.model import Attendance
from src.course_attendance.course_attendance.core.constants import MAX_DISTANCE_KM
from src.course_attendance.course_attendance.core.enums import EligibilityFailure
from src.course_attendance.course_attendance.courses.model import Event, Location

NOW = datetime(2026, 3, 2, 10, 0, 0)
NYC_LON, NYC_LAT = -74.0060, 40.7128


def _event(start_at=NOW - timedelta(minutes=30), end_at=NOW + timedelta(minutes=30)) -> Event:
    return Event(id=1, course_id=1, location_id=1, name="Lecture", start_at=start_at, end_at=end_at)


def _location(longitude=NYC_LON, latitude=NYC_LAT) -> Location:
    return Location(id=1, course_id=1, name="Hall", longitude=longitude, latitude=latitude)


def _attendance(longitude=NYC_LON, latitude=NYC_LAT) -> Attendance:
    return Attendance(id=None, account_id=1, course_id=1, event_id=1, longitude=longitude, latitude=latitude)


def test_same_place_during_event_is_eligible():
    assert check_eligibility(_attendance(), _event(), _location(), NOW) is None


def test_far_away_during_event_fails_proximity():
    far = _attendance(longitude=-74.0, latitude=41.0)
    assert check_eligibility(far, _event(), _location(), NOW) == EligibilityFailure.PROXIMITY


def test_ended_event_fails_time_window():
    ended = _event(start_at=NOW - timedelta(hours=2), end_at=NOW - timedelta(hours=1))
    assert check_eligibility(_attendance(), ended, _location(), NOW) == EligibilityFailure.TIME_WINDOW


def test_time_window_is_checked_before_proximity():
    far = _attendance(longitude=-74.0, latitude=41.0)
    upcoming = _event(start_at=NOW + timedelta(hours=1), end_at=NOW + timedelta(hours=2))

    assert check_eligibility(far, upcoming, _location(), NOW) == EligibilityFailure.TIME_WINDOW


@pytest.mark.parametrize("offset", [timedelta(seconds=-1), timedelta(seconds=1)])
def test_outside_window_by_one_second(offset):
    event = _event()
    at = event.start_at + offset if offset < timedelta(0) else event.end_at + offset
    assert check_eligibility(_attendance(), event, _location(), at) == EligibilityFailure.TIME_WINDOW


def test_window_boundaries_are_inclusive():
    event = _event()
    assert check_eligibility(_attendance(), event, _location(), event.start_at) is None
    assert check_eligibility(_attendance(), event, _location(), event.end_at) is None


def test_about_33_meters_away_is_eligible():
    near = _attendance(latitude=NYC_LAT + 0.0003)
    assert check_eligibility(near, _event(), _location(), NOW) is None


def test_about_67_meters_away_fails_proximity():
    near = _attendance(latitude=NYC_LAT + 0.0006)
    assert check_eligibility(near, _event(), _location(), NOW) == EligibilityFailure.PROXIMITY


def test_exactly_max_distance_is_within_range(monkeypatch):
    monkeypatch.setattr(Attendance, "distance_to_event", lambda self, location: MAX_DISTANCE_KM)
    assert check_eligibility(_attendance(), _event(), _location(), NOW) is None

    monkeypatch.setattr(Attendance, "distance_to_event", lambda self, location: MAX_DISTANCE_KM + 1e-9)
    assert check_eligibility(_attendance(), _event(), _location(), NOW) == EligibilityFailure.PROXIMITY


def test_custom_threshold_boundary_is_inclusive():
    attendance = _attendance(latitude=NYC_LAT + 0.0004)
    location = _location()
    exact = attendance.distance_to_event(location)
    eligibility = AttendanceEligibility(criteria=(TimeWindowCriterion(), ProximityCriterion(max_distance_km=exact)))

    assert eligibility.check(attendance=attendance, event=_event(), location=location, time=NOW) is None


def test_max_distance_is_55_meters():
    assert MAX_DISTANCE_KM == 0.055


def test_missing_attendance_coordinates_fail_proximity():
    blind = _attendance(longitude=None, latitude=None)
    assert check_eligibility(blind, _event(), _location(), NOW) == EligibilityFailure.PROXIMITY


def test_no_time_range_and_no_coordinates_is_always_eligible():
    open_event = _event(start_at=None, end_at=None)
    unplaced = Location(id=1, course_id=1, name="TBD")
    blind = _attendance(longitude=None, latitude=None)

    assert check_eligibility(blind, open_event, unplaced, NOW) is None
    assert check_eligibility(blind, open_event, None, NOW) is None


def test_time_defaults_to_now(monkeypatch):
    from src.course_attendance.course_attendance.attendance import eligibility

    monkeypatch.setattr(eligibility, "now_local", lambda tz=None: NOW)
    assert check_eligibility(_attendance(), _event(), _location()) is None


def test_time_defaults_to_now_in_event_timezone():
    now = datetime.now(timezone.utc)
    running = _event(start_at=now - timedelta(minutes=30), end_at=now + timedelta(minutes=30))
    finished = _event(start_at=now - timedelta(hours=2), end_at=now - timedelta(hours=1))

    assert check_eligibility(_attendance(), running, _location()) is None
    assert check_eligibility(_attendance(), finished, _location()) == EligibilityFailure.TIME_WINDOW
