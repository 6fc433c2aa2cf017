"""Query size limits."""

# Default number of observations requested from eBird per query.
DEFAULT_MAX_RESULTS: int = 200

# Every query is clamped to this to bound the remote payload size.
MAX_RESULTS_CAP: int = 500

# Ranges longer than this use eBird's historic endpoint instead of /recent.
RECENT_WINDOW_DAYS: int = 30
