import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "nightbase"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "nightbase"),
}

CRON_SECRET = os.getenv("CRON_SECRET", "")

BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "Asia/Tokyo")

AUTO_CLOCKOUT_GATE = os.getenv("AUTO_CLOCKOUT_GATE", "watermark")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
