"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NOT_MARKED = "Not Marked"
NO_ACTIVE_MESSAGES = "No active messages"

MIN_PASSWORD_LENGTH = 6
DEFAULT_SESSION_DAYS = 7

# One week; keeps start_time + duration inside the DATETIME range
MAX_MESSAGE_MINUTES = 7 * 24 * 60
