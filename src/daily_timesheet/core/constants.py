"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAILY_HOURS_LIMIT = 8
MS_PER_HOUR = 3_600_000
DAILY_LIMIT_MS = DAILY_HOURS_LIMIT * MS_PER_HOUR

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_TIMEZONE = "UTC"
