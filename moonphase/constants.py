"""Constants for moonphase."""

# Data provider defaults
DEFAULT_API_URL = "https://aa.usno.navy.mil"
PHASES_ENDPOINT = "/api/moon/phases/date"
DEFAULT_TIMEOUT = 10.0

# Number of major phase events requested per lookup
DEFAULT_EVENT_COUNT = 4

# Days to step back from the target date before requesting events. Four events
# span about 22 days, so starting 10 days back always brackets the target.
LOOKBACK_DAYS = 10

# Days around a major phase still reported as that phase
PROXIMITY_DAYS = 2

# Cache file name, relative to the user's home directory
CACHE_FILE_NAME = ".moonphase"

DATE_FORMAT = "%Y-%m-%d"
