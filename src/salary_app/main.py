from __future__ import annotations

import importlib
import logging
import logging.config
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_ISOLATION_LEVEL
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .reference.controller import register as register_reference
from .salaries.controller import register as register_salaries

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Passing a ready ``container`` skips database wiring and bootstrap (tests).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging_config = getattr(settings, "LOGGING_CONFIG", None)
    if logging_config:
        logging.config.dictConfig(logging_config)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("Demo seed ready")

        container = build_container(
            db_config=db_config,
            isolation_level=getattr(settings, "TX_ISOLATION_LEVEL", DEFAULT_ISOLATION_LEVEL),
            currency_symbol=getattr(settings, "CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
        )

    register_employees(app, container)
    register_salaries(app, container)
    register_reference(app, container)

    return app
