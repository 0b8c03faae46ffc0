"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_SHIFT_START = time(9, 0)
DEFAULT_SHIFT_END = time(18, 0)
DEFAULT_TIME_ZONE = "Asia/Kolkata"
DEFAULT_LATE_GRACE_MINUTES = 15
DEFAULT_FULL_DAY_HOURS = 9.0
DEFAULT_HALF_DAY_HOURS = 5.0
# Sunday (0 = Sunday ... 6 = Saturday)
DEFAULT_WEEKLY_OFF_DAYS = frozenset({0})

LEAVE_YEAR_START_MONTH = 11
FREE_LEAVE_DAYS = 1
MONTHLY_WORKING_DAYS = 26

DEFAULT_GEOFENCE_RADIUS_M = 200
EARTH_RADIUS_M = 6_371_000

SANDWICH_DAYS_PER_BLOCK = 2
