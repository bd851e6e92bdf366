from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .database.bootstrap import apply_schema, ensure_demo_users, list_tables
from .database.connection import DBConfig

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .core.constants import DEFAULT_SESSION_DAYS
from .messages.controller import register as register_messages
from .roster.controller import register as register_roster
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Container | None = None) -> Flask:
    """App factory.

    Pass ``container`` to run against prebuilt services (tests use in-memory
    repositories); otherwise the MySQL container is built from settings.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(days=DEFAULT_SESSION_DAYS)

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", []), supports_credentials=True)

    log_level = getattr(settings, "LOG_LEVEL", "DEBUG" if app.config["DEBUG"] else "INFO")
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    if container is None:
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            ensure_demo_users(db_config)
            logger.info("demo seed ready")

        container = build_container(db_config=db_config)

    register_users(app, container)
    register_roster(app, container)
    register_attendance(app, container)
    register_messages(app, container)

    return app
