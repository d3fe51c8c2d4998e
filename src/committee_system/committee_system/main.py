from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_error_handlers
from .common.logging import configure_logging
from .container import Container, EngineSettings, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_subcommittees, list_tables

from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .meetings.controller import register as register_meetings
from .members.controller import register as register_members
from .payments.controller import register as register_payments
from .subcommittees.controller import register as register_subcommittees

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the JSON API.

    Passing a ready `container` skips every database step (used by tests).
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

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
            ensure_subcommittees(db_config)
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, settings=EngineSettings.from_settings(settings))

    register_error_handlers(app)
    register_members(app, container)
    register_subcommittees(app, container)
    register_attendance(app, container)
    register_payments(app, container)
    register_meetings(app, container)
    register_dashboard(app, container)

    return app
