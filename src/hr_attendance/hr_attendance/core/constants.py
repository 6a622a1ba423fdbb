"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HR_SETTINGS_KEY = "hr"

DEFAULT_WORK_START = "08:00"
DEFAULT_ABSENT_CUTOFF = "09:00"
DEFAULT_GRACE_MINUTES = 0

DEFAULT_PERIOD1_START = 1
DEFAULT_PERIOD1_END = 15
DEFAULT_PERIOD2_START = 16
DEFAULT_SALARY_DEDUCTION_BASE_DAYS = 26
WORK_HOURS_PER_DAY = 8

DEFAULT_FETCH_WORKERS = 6
