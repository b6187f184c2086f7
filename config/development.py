import os

from . import logging_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salary_app"),
}

TX_ISOLATION_LEVEL = os.getenv("TX_ISOLATION_LEVEL", "REPEATABLE READ")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

LOGGING_CONFIG = logging_config(os.getenv("LOG_LEVEL", "DEBUG"))
