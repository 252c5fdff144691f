from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_datetime
from ..common.http import current_requestor, handle_domain_errors, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Attendance
from .report_csv import to_csv


def _attendance_json(a: Attendance) -> dict:
    return {
        "id": a.id,
        "account_id": a.account_id,
        "course_id": a.course_id,
        "event_id": a.event_id,
        "name": a.name,
        "longitude": a.longitude,
        "latitude": a.latitude,
        "created_at": a.created_at.isoformat() if a.created_at else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/courses/<int:course_id>/attendances", methods=["POST"], endpoint="record_attendance")
    @login_required
    @handle_domain_errors
    def record_attendance(course_id: int):
        data = request.get_json(silent=True) or {}
        attendance = container.attendance_service.record_attendance(
            current_requestor(),
            course_id=course_id,
            event_id=data.get("event_id"),
            longitude=data.get("longitude"),
            latitude=data.get("latitude"),
        )
        return jsonify({"success": True, "data": _attendance_json(attendance)}), 201

    @app.route("/api/courses/<int:course_id>/attendances", methods=["GET"], endpoint="my_attendances")
    @login_required
    @handle_domain_errors
    def my_attendances(course_id: int):
        rows = container.attendance_service.list_user_attendances(current_requestor(), course_id=course_id)
        return jsonify({"success": True, "data": [_attendance_json(a) for a in rows]}), 200

    @app.route(
        "/api/courses/<int:course_id>/events/<int:event_id>/attendances",
        methods=["GET"],
        endpoint="list_event_attendances",
    )
    @login_required
    @handle_domain_errors
    def list_event_attendances(course_id: int, event_id: int):
        rows = container.attendance_service.list_attendances_by_event(
            current_requestor(), course_id=course_id, event_id=event_id
        )
        return jsonify({"success": True, "data": [_attendance_json(a) for a in rows]}), 200

    @app.route("/api/courses/<int:course_id>/attendances/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    @login_required
    @handle_domain_errors
    def attendance_report_csv(course_id: int):
        report = container.attendance_service.generate_report(current_requestor(), course_id=course_id)
        filename = f"attendance_report_{course_id}_{report.generated_at.strftime('%Y%m%d')}.csv"
        return app.response_class(
            to_csv(report).encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/events/active", methods=["GET"], endpoint="active_events")
    @login_required
    @handle_domain_errors
    def active_events():
        at_s = request.args.get("at")
        try:
            at = parse_iso_datetime(at_s) if at_s else None
        except ValueError:
            raise ValidationError("Invalid time format")
        rows = container.event_service.find_active_events(current_requestor(), at=at)
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]}), 200
