"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MILLIS_PER_MINUTE = 60_000
DEFAULT_SWEEP_INTERVAL_SECONDS = 60

CSV_HEADER = "Name,Roll No,Status"
