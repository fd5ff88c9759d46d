"""Constants for the call profiler.

This file contains only the constants shared between layers.
Per-session tuning lives in the YAML configuration (see config_loader).
"""

from __future__ import annotations

# Ring buffer of recent calls kept per operation
RECENT_CALLS_CAPACITY = 10
# Number of ring buffer entries exposed in derived statistics
RECENT_CALLS_VIEW_SIZE = 5

# Entries per hotspot ranking
HOTSPOT_LIMIT = 5

# Nearest-rank percentiles reported for every operation
PERCENTILE_RANKS = (50, 90, 95, 99)

# Unit conversions
MS_PER_SECOND = 1000.0
BYTES_PER_KB = 1024.0

# Members called on every pointer move; wrapping them drowns the report
DEFAULT_EXCLUDED_OPERATIONS = ("get_state", "check_event")

# Configuration keys
CONF_EXCLUDED_OPERATIONS = "excluded_operations"
CONF_RECENT_CALLS_CAPACITY = "recent_calls_capacity"
CONF_RECENT_CALLS_VIEW = "recent_calls_view"
CONF_HOTSPOT_LIMIT = "hotspot_limit"
CONF_TRACK_MEMORY = "track_memory"
CONF_START_ACTIVE = "start_active"
