"""Course Attendance package.

This package is organized by feature modules (courses, attendance, policies, ...)
with a thin Flask controller layer over pure domain values and service classes.
"""
