"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

GRID_WEEKS = 6
DAYS_PER_WEEK = 7
GRID_CELLS = GRID_WEEKS * DAYS_PER_WEEK
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

DAY_KEY_FORMAT = "%Y-%m-%d"
MONTH_KEY_FORMAT = "%Y-%m"

DEFAULT_UPCOMING_HORIZON_DAYS = 30
DEFAULT_DUE_SOON_DAYS = 7
DEFAULT_ATTENDANCE_WINDOW_DAYS = 7
DEFAULT_TERM_MONTHS = 3
DEFAULT_CELL_EVENT_CAP = 3
DEFAULT_RECENT_PAYMENTS_LIMIT = 6
DEFAULT_NEXT_EVENTS_LIMIT = 3

EXCELLENT_ATTENDANCE = 90
GOOD_ATTENDANCE = 80
FAIR_ATTENDANCE = 70
