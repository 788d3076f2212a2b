"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "sk_attendance_history_v2"
STORAGE_FORMAT_VERSION = 1

YEAR_GROUPS = (1, 2, 3, 4, 5, 6)
MIN_YEAR = 1
MAX_YEAR = 6

NO_TEACHER_LABEL = "Tiada Guru Dipilih"

MONTH_NAMES_MS = (
    "Januari",
    "Februari",
    "Mac",
    "April",
    "Mei",
    "Jun",
    "Julai",
    "Ogos",
    "September",
    "Oktober",
    "November",
    "Disember",
)

DEFAULT_CLOUD_SYNC_TIMEOUT = 15.0
