SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "school_attendance_test",
}

STORAGE_BACKEND = "memory"

DEFAULT_START_TIME = "08:00"
LATE_GRACE_MINUTES = 0
REPORT_DAYS = 7

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = True
