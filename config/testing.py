from config.config import *  # noqa: F401,F403

DEBUG = False
TESTING = True

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "payroll_test",
}

MONTHLY_WORKING_DAYS = 26
LEAVE_YEAR_START_MONTH = 11
FREE_LEAVE_DAYS = 1
DEFAULT_HALF_DAY_HOURS = 5.0
DEFAULT_TIME_ZONE = "Asia/Kolkata"
OFFICE_GEOFENCE = None
PAYROLL_RULE = None
