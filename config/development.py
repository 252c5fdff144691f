import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Owners, instructors and staff may check in without the time/place rules
TEACHING_STAFF_EXEMPT = bool(int(os.getenv("TEACHING_STAFF_EXEMPT", "1")))
