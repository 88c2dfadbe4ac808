import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "banco_horas"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Empty token leaves the API open (local development only)
API_TOKEN = os.getenv("API_TOKEN", "")

# Sólides Tangerino (read-only)
SOLIDES_API_URL = os.getenv("SOLIDES_API_URL", "https://employer.tangerino.com.br/api")
SOLIDES_API_TOKEN = os.getenv("SOLIDES_API_TOKEN", "")
SOLIDES_COMPANY_ID = os.getenv("SOLIDES_COMPANY_ID", "")
SOLIDES_TIMEOUT_SECONDS = float(os.getenv("SOLIDES_TIMEOUT_SECONDS", "15"))

# Jornada
EXPECTED_DAILY_MINUTES = int(os.getenv("EXPECTED_DAILY_MINUTES", "480"))
EXPECTED_SATURDAY_MINUTES = int(os.getenv("EXPECTED_SATURDAY_MINUTES", "240"))
TOLERANCE_MINUTES = int(os.getenv("TOLERANCE_MINUTES", "0"))

SYNC_MAX_DAYS = int(os.getenv("SYNC_MAX_DAYS", "90"))
SYNC_JOB_RETENTION_SECONDS = int(os.getenv("SYNC_JOB_RETENTION_SECONDS", "3600"))

INCLUDE_NATIONAL_HOLIDAYS = bool(int(os.getenv("INCLUDE_NATIONAL_HOLIDAYS", "1")))
HOLIDAY_SUBDIV = os.getenv("HOLIDAY_SUBDIV") or None

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
