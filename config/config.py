import os
from decimal import Decimal


class Config:
    """Shared settings read from the environment (and .env via python-dotenv)."""

    # Database
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "payroll_db")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))

    # Payroll / leave policy
    MONTHLY_WORKING_DAYS = Decimal(os.environ.get("MONTHLY_WORKING_DAYS", "26"))
    LEAVE_YEAR_START_MONTH = int(os.environ.get("LEAVE_YEAR_START_MONTH", "11"))
    FREE_LEAVE_DAYS = int(os.environ.get("FREE_LEAVE_DAYS", "1"))

    # Default shift
    DEFAULT_HALF_DAY_HOURS = float(os.environ.get("DEFAULT_HALF_DAY_HOURS", "5"))
    DEFAULT_TIME_ZONE = os.environ.get("DEFAULT_TIME_ZONE", "Asia/Kolkata")

    # Office geofence (disabled unless both coordinates are set)
    OFFICE_LATITUDE = os.environ.get("OFFICE_LATITUDE")
    OFFICE_LONGITUDE = os.environ.get("OFFICE_LONGITUDE")
    OFFICE_RADIUS_M = float(os.environ.get("OFFICE_RADIUS_M", "200"))


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}

OFFICE_GEOFENCE = (
    {
        "latitude": float(Config.OFFICE_LATITUDE),
        "longitude": float(Config.OFFICE_LONGITUDE),
        "allowed_radius_m": Config.OFFICE_RADIUS_M,
    }
    if Config.OFFICE_LATITUDE and Config.OFFICE_LONGITUDE
    else None
)

MONTHLY_WORKING_DAYS = Config.MONTHLY_WORKING_DAYS
LEAVE_YEAR_START_MONTH = Config.LEAVE_YEAR_START_MONTH
FREE_LEAVE_DAYS = Config.FREE_LEAVE_DAYS
DEFAULT_HALF_DAY_HOURS = Config.DEFAULT_HALF_DAY_HOURS
DEFAULT_TIME_ZONE = Config.DEFAULT_TIME_ZONE
LOG_LEVEL = Config.LOG_LEVEL
AUTO_INIT_DB = Config.AUTO_INIT_DB
