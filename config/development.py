import os

from .config import DB_CONFIG, DEFAULT_SALARY_SETTINGS, DEFAULT_WORKING_SCHEDULE, TIMEZONE  # noqa: F401

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
