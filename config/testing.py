from .config import DB_CONFIG, DEFAULT_SALARY_SETTINGS, DEFAULT_WORKING_SCHEDULE  # noqa: F401

DEBUG = False
TESTING = True

# Tests inject explicit clocks; keep local time.
TIMEZONE = None

AUTO_INIT_DB = False
