import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TEACHING_STAFF_EXEMPT = bool(int(os.getenv("TEACHING_STAFF_EXEMPT", "1")))
