"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_GRACE_MINUTES = 15
DEFAULT_HALF_DAY_THRESHOLD_HOURS = 4
DEFAULT_PAGE_SIZE = 50
DEFAULT_REPORT_DAYS = 30

# date.weekday(): Monday=0 ... Saturday=5, Sunday=6
WEEKEND_WEEKDAYS = frozenset({5, 6})

DEFAULT_SORT_BY = "EmployeeName"
DEFAULT_SORT_ORDER = "asc"
