import os

from .config import DB_CONFIG, DEFAULT_SALARY_SETTINGS, DEFAULT_WORKING_SCHEDULE, TIMEZONE  # noqa: F401

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
