SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

TEACHING_STAFF_EXEMPT = True
