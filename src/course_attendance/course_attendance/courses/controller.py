from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_requestor, handle_domain_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/courses/<int:course_id>/assignable_roles", methods=["GET"], endpoint="assignable_roles")
    @login_required
    @handle_domain_errors
    def assignable_roles(course_id: int):
        roles = container.course_service.assignable_roles(current_requestor(), course_id=course_id)
        return jsonify({"success": True, "data": [r.value for r in roles]}), 200
