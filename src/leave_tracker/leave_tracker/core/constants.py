"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "personnelData"
PERSON_ID_PREFIX = "p_"

DEFAULT_WINDOW_DAYS = 30
RECENT_HISTORY_LIMIT = 3
