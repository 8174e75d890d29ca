from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .people.controller import register as register_people
from .reports.controller import register as register_reports
from .school.controller import register as register_school

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "database" / "schema.sql"


def create_app() -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    container = build_container(settings)
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info(
        "settings=%s backend=%s db=%s@%s:%s/%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "mysql"),
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container.conn is not None and getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
    if getattr(settings, "AUTO_SEED_DB", False):
        container.school_service.ensure_defaults()
        container.class_service.ensure_defaults()
        logger.info("Default school profile and classes ready")

    app.extensions["school_attendance"] = container

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_people(app, container)
    register_classes(app, container)
    register_school(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
