"""Shared settings: clinic defaults used until an operator saves settings."""

import os


class Config:
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "clinic_payroll")

    TIMEZONE = os.environ.get("CLINIC_TIMEZONE", "Asia/Karachi")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}

TIMEZONE = Config.TIMEZONE

# Monday-Saturday clinic week, Sunday off.
DEFAULT_WORKING_SCHEDULE = {
    "workingDays": {
        "monday": True,
        "tuesday": True,
        "wednesday": True,
        "thursday": True,
        "friday": True,
        "saturday": True,
        "sunday": False,
    },
    "checkInTime": "09:00",
    "checkOutTime": "17:00",
}

# Amounts in PKR.
DEFAULT_SALARY_SETTINGS = {
    "lateArrivalThreshold": 3,
    "lateArrivalDeductionDays": 1,
    "absentDeductionAmount": 1000,
    "leaveDeductionAmount": 500,
    "overtimeRate": 200,
    "minOvertimeHours": 1,
}
