from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .clockout.controller import register as register_clockout
from .common.logging_config import configure_logging
from .container import build_container
from .core.constants import DEFAULT_BUSINESS_TIMEZONE, DEFAULT_GATE_MODE
from .database.bootstrap import apply_schema, list_tables

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app() -> Flask:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["CRON_SECRET"] = getattr(settings, "CRON_SECRET", None)

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        get_settings_module(),
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    if not app.config["CRON_SECRET"]:
        logger.warning("CRON_SECRET is not set; /api/cron/auto-clockout accepts any caller")

    container = build_container(
        db_config=db_config,
        business_timezone=getattr(settings, "BUSINESS_TIMEZONE", DEFAULT_BUSINESS_TIMEZONE),
        gate_mode=getattr(settings, "AUTO_CLOCKOUT_GATE", DEFAULT_GATE_MODE),
    )

    register_clockout(app, container)

    return app
