"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_RATE_PER_MEETING = 100
DEFAULT_CONVENER_BONUS = 50
DEFAULT_MIN_CONTACT_LENGTH = 10
DEFAULT_SEARCH_LIMIT = 50
DEFAULT_MEETING_LIMIT = 100

MAX_SUBCOMMITTEES_PER_MEMBER = 2

DEFAULT_SUBCOMMITTEE_ORDER = ("Transport", "Revenue", "Travel")

GENERAL_MEETING_LABEL = "General Meeting"
CONVENER_MEETING_LABEL = "Execo"
