from __future__ import annotations

import csv
import io

from .report import AttendanceReport

HEADER = ["Student Email", "attend_sum", "attend_percent"]


def to_csv(report: AttendanceReport) -> str:
    """Render a report as CSV: one row per student, event columns in event order."""

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(HEADER + [e.name for e in report.events])
    for record in report.student_records:
        writer.writerow(
            [record.email, record.attend_sum, record.attend_percent]
            + [record.event_attendance[e.id] for e in report.events]
        )
    return out.getvalue()
