"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Persisted document keys
ATTENDANCE_DOCUMENT = "attendanceRecords"
SALARY_SETTINGS_DOCUMENT = "salarySettings"
WORKING_SCHEDULE_DOCUMENT = "workingSchedule"

DEFAULT_CHECK_IN_TIME = "09:00"
DEFAULT_CHECK_OUT_TIME = "17:00"

# Time assumed for a record synthesized by checkout without a prior mark
IMPLICIT_CHECK_IN_TIME = "09:00"

HALF_DAY_WINDOW_MINUTES = 30
DAILY_RATE_DIVISOR = 30
OVERTIME_MULTIPLIER = 1.5

MIN_SALARY_YEAR = 2000

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
