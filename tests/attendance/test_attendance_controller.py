from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from src.course_attendance.course_attendance.attendance.model import Attendance
from src.course_attendance.course_attendance.courses.model import Course, Enrollment, Event, Location
from src.course_attendance.course_attendance.main import create_app

NYC_LON, NYC_LAT = -74.0060, 40.7128


@dataclass
class InMemoryCourses:
    courses: dict[int, Course]
    enrollments: list[Enrollment]

    def get_by_id(self, course_id: int) -> Optional[Course]:
        return self.courses.get(course_id)

    def find_full(self, course_id: int) -> Optional[Course]:
        c = self.courses.get(course_id)
        if not c:
            return None
        return replace(c, enrollments=[e for e in self.enrollments if e.course_id == course_id])

    def find_ids(self, course_ids):
        return {cid: self.courses[cid] for cid in course_ids if cid in self.courses}

    def find_enrollment(self, *, account_id: int, course_id: int) -> Optional[Enrollment]:
        return next((e for e in self.enrollments if e.account_id == account_id and e.course_id == course_id), None)

    def course_ids_for_account(self, account_id: int):
        return [e.course_id for e in self.enrollments if e.account_id == account_id]


@dataclass
class InMemoryEvents:
    events: dict[int, Event]

    def get_by_id(self, event_id: int) -> Optional[Event]:
        return self.events.get(event_id)

    def find_active_at(self, course_ids, at: datetime):
        return [e for e in self.events.values() if e.course_id in course_ids and e.active(at=at)]


@dataclass
class InMemoryLocations:
    locations: dict[int, Location]

    def get_by_id(self, location_id: int) -> Optional[Location]:
        return self.locations.get(location_id)

    def find_ids(self, location_ids):
        return {lid: self.locations[lid] for lid in location_ids if lid in self.locations}


@dataclass
class InMemoryAttendances:
    rows: list[Attendance] = field(default_factory=list)

    def create(self, attendance: Attendance) -> Attendance:
        saved = replace(attendance, id=len(self.rows) + 1, created_at=datetime.now())
        self.rows.append(saved)
        return saved

    def find_by_course(self, course_id: int):
        return [a for a in self.rows if a.course_id == course_id]

    def find_by_event(self, event_id: int):
        return [a for a in self.rows if a.event_id == event_id]

    def find_by_account_course(self, account_id: int, course_id: int):
        return [a for a in self.rows if a.account_id == account_id and a.course_id == course_id]

    def find_for_account_and_event(self, *, account_id: int, event_id: int) -> Optional[Attendance]:
        return next((a for a in self.rows if a.account_id == account_id and a.event_id == event_id), None)

    def find_attended_event_ids(self, account_id: int, event_ids):
        return {a.event_id for a in self.rows if a.account_id == account_id and a.event_id in event_ids}


@pytest.fixture
def attendances():
    return InMemoryAttendances()


@pytest.fixture
def client(attendances):
    now = datetime.now()
    lecture = Event(
        id=10,
        course_id=1,
        location_id=5,
        name="Lecture 1",
        start_at=now - timedelta(minutes=30),
        end_at=now + timedelta(minutes=30),
    )
    seminar = Event(
        id=11,
        course_id=1,
        location_id=5,
        name="Seminar",
        start_at=now - timedelta(hours=3),
        end_at=now - timedelta(hours=2),
    )
    hall = Location(id=5, course_id=1, name="Hall", longitude=NYC_LON, latitude=NYC_LAT)
    course = Course(id=1, name="SE", events=[lecture, seminar], locations=[hall])
    courses = InMemoryCourses(
        courses={1: course},
        enrollments=[
            Enrollment(account_id=1, course_id=1, roles=["student"], account_email="alice@example.com"),
            Enrollment(account_id=2, course_id=1, roles=["owner"], account_email="olga@example.com"),
        ],
    )

    app = create_app(
        courses=courses,
        events=InMemoryEvents({10: lecture, 11: seminar}),
        locations=InMemoryLocations({5: hall}),
        attendances=attendances,
        settings_module="config.testing",
    )
    return app.test_client()


def _login(client, account_id: int, roles=("member",)):
    with client.session_transaction() as sess:
        sess["account_id"] = account_id
        sess["roles"] = list(roles)


def test_requires_login(client):
    resp = client.post("/api/courses/1/attendances", json={"event_id": 10})
    assert resp.status_code == 401


def test_check_in_on_site(client, attendances):
    _login(client, 1)

    resp = client.post("/api/courses/1/attendances", json={"event_id": 10, "longitude": NYC_LON, "latitude": NYC_LAT})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["event_id"] == 10
    assert len(attendances.rows) == 1


def test_check_in_too_far_is_forbidden(client, attendances):
    _login(client, 1)

    resp = client.post("/api/courses/1/attendances", json={"event_id": 10, "longitude": -74.0, "latitude": 41.0})

    assert resp.status_code == 403
    assert "geo-fence" in resp.get_json()["message"]
    assert attendances.rows == []


def test_check_in_after_event_is_forbidden(client):
    _login(client, 1)

    resp = client.post("/api/courses/1/attendances", json={"event_id": 11, "longitude": NYC_LON, "latitude": NYC_LAT})

    assert resp.status_code == 403
    assert "time window" in resp.get_json()["message"]


def test_bad_input_and_missing_records(client):
    _login(client, 1)

    assert client.post("/api/courses/1/attendances", json={"longitude": NYC_LON, "latitude": NYC_LAT}).status_code == 400
    assert client.post("/api/courses/1/attendances", json={"event_id": 10, "longitude": "x", "latitude": 1}).status_code == 400
    assert client.post("/api/courses/1/attendances", json={"event_id": 99, "longitude": 0, "latitude": 0}).status_code == 404
    assert client.post("/api/courses/7/attendances", json={"event_id": 10}).status_code == 404


def test_report_csv(client):
    _login(client, 1)
    client.post("/api/courses/1/attendances", json={"event_id": 10, "longitude": NYC_LON, "latitude": NYC_LAT})

    assert client.get("/api/courses/1/attendances/report.csv").status_code == 403

    _login(client, 2)
    resp = client.get("/api/courses/1/attendances/report.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines == [
        "Student Email,attend_sum,attend_percent,Lecture 1,Seminar",
        "alice@example.com,1,50.0,1,0",
    ]


def test_event_attendances_for_teaching_staff(client):
    _login(client, 1)
    client.post("/api/courses/1/attendances", json={"event_id": 10, "longitude": NYC_LON, "latitude": NYC_LAT})

    _login(client, 2)
    resp = client.get("/api/courses/1/events/10/attendances")

    assert resp.status_code == 200
    assert [row["account_id"] for row in resp.get_json()["data"]] == [1]


def test_active_events(client):
    _login(client, 1)

    resp = client.get("/api/events/active")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert [e["id"] for e in data] == [10]
    assert data[0]["course_name"] == "SE"
    assert data[0]["location_name"] == "Hall"
    assert data[0]["user_attendance_status"] is False


def test_active_events_rejects_bad_time(client):
    _login(client, 1)
    assert client.get("/api/events/active?at=yesterday").status_code == 400


def test_assignable_roles(client):
    _login(client, 2)
    resp = client.get("/api/courses/1/assignable_roles")
    assert resp.status_code == 200
    assert set(resp.get_json()["data"]) == {"owner", "instructor", "staff", "student"}

    _login(client, 1)
    assert client.get("/api/courses/1/assignable_roles").get_json()["data"] == []

    _login(client, 9)
    assert client.get("/api/courses/1/assignable_roles").status_code == 403


def test_check_in_without_coordinates_is_forbidden(client, attendances):
    _login(client, 1)

    resp = client.post("/api/courses/1/attendances", json={"event_id": 10})

    assert resp.status_code == 403
    assert resp.get_json() == {"success": False, "message": "Location coordinates are required"}
    assert attendances.rows == []


def test_my_attendances(client):
    _login(client, 1)
    client.post("/api/courses/1/attendances", json={"event_id": 10, "longitude": NYC_LON, "latitude": NYC_LAT})

    resp = client.get("/api/courses/1/attendances")
    assert resp.status_code == 200
    assert [(row["account_id"], row["event_id"]) for row in resp.get_json()["data"]] == [(1, 10)]

    _login(client, 2)
    assert client.get("/api/courses/1/attendances").get_json()["data"] == []

    _login(client, 9)
    assert client.get("/api/courses/1/attendances").status_code == 403


@pytest.mark.parametrize("path", ["/api/courses/1/assignable_roles", "/api/events/active"])
def test_corrupt_session_roles_answer_json_500(client, path):
    _login(client, 1, roles=("bogus",))

    resp = client.get(path)

    assert resp.status_code == 500
    assert resp.is_json
    assert resp.get_json() == {"success": False, "message": "Internal error"}


def test_assignable_roles_requires_login(client):
    resp = client.get("/api/courses/1/assignable_roles")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False
