import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "nightbase"),
}

# Shared secret for /api/cron/auto-clockout; empty leaves the endpoint open.
CRON_SECRET = os.getenv("CRON_SECRET", "")

# Timezone that store switch times and work dates are expressed in
BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "Asia/Tokyo")

# "watermark" catches up after a missed trigger; "hour" only acts in the switch hour.
AUTO_CLOCKOUT_GATE = os.getenv("AUTO_CLOCKOUT_GATE", "watermark")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
