import os

from . import logging_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salary_app"),
}

TX_ISOLATION_LEVEL = os.getenv("TX_ISOLATION_LEVEL", "REPEATABLE READ")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

LOGGING_CONFIG = logging_config(os.getenv("LOG_LEVEL", "INFO"))
