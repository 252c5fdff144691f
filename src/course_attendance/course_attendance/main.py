from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.repository import AttendanceRepository
from .container import build_container
from .courses.controller import register as register_courses
from .courses.repository import CourseRepository, EventRepository, LocationRepository

logger = logging.getLogger(__name__)


def create_app(
    *,
    courses: CourseRepository,
    events: EventRepository,
    locations: LocationRepository,
    attendances: AttendanceRepository,
    settings_module: Optional[str] = None,
) -> Flask:
    """Build the Flask app over repositories supplied by the persistence layer."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("[course-attendance] settings=%s", settings_module)

    container = build_container(
        courses=courses,
        events=events,
        locations=locations,
        attendances=attendances,
        teaching_staff_exempt=bool(getattr(settings, "TEACHING_STAFF_EXEMPT", True)),
    )

    register_attendance(app, container)
    register_courses(app, container)

    return app
