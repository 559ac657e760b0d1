import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "nightbase_test"),
}

CRON_SECRET = "test-cron-secret"

BUSINESS_TIMEZONE = "Asia/Tokyo"

AUTO_CLOCKOUT_GATE = "watermark"

LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
