import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "banco_horas_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

API_TOKEN = "test-token"

SOLIDES_API_URL = "http://solides.invalid/api"
SOLIDES_API_TOKEN = "test"
SOLIDES_COMPANY_ID = "test-company"
SOLIDES_TIMEOUT_SECONDS = 1.0

EXPECTED_DAILY_MINUTES = 480
EXPECTED_SATURDAY_MINUTES = 240
TOLERANCE_MINUTES = 0

SYNC_MAX_DAYS = 90
SYNC_JOB_RETENTION_SECONDS = 3600

INCLUDE_NATIONAL_HOLIDAYS = False
HOLIDAY_SUBDIV = None

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
