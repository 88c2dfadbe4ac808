"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EXPECTED_DAILY_MINUTES = 480
EXPECTED_SATURDAY_MINUTES = 240
APPRENTICE_DAILY_MINUTES = 240
DEFAULT_TOLERANCE_MINUTES = 0

SYNC_MAX_DAYS = 90
SYNC_POLL_INTERVAL_SECONDS = 2
SYNC_JOB_RETENTION_SECONDS = 3600

MAX_PUNCHES_PER_DAY = 4
DEFAULT_AUDIT_LIMIT = 100

SOURCE_TIMEZONE = "America/Sao_Paulo"
