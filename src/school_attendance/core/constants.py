"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_START_TIME = "08:00"
MAX_START_TIME_LENGTH = 64
DEFAULT_LATE_GRACE_MINUTES = 0
DEFAULT_REPORT_DAYS = 7
MAX_REPORT_DAYS = 366

DEFAULT_SCHOOL_NAME = "My School"
DEFAULT_CLASSES = (("10", "A"), ("11", "Science"), ("12", "Commerce"))
DEFAULT_SECTION = "A"

AVATAR_URL_TEMPLATE = "https://ui-avatars.com/api/?name={name}&background=e2e8f0&color=64748b"
