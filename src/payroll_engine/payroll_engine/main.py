from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .core.exceptions import ConfigurationError, DomainError
from .database.bootstrap import apply_schema, list_tables
from .attendance.controller import register as register_attendance
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ConfigurationError)
    def _configuration_error(ex: ConfigurationError):
        logger.error("[payroll-engine] configuration error: %s", ex)
        return jsonify({"error": "ConfigurationError", "message": str(ex)}), 500

    @app.errorhandler(DomainError)
    def _domain_error(ex: DomainError):
        return jsonify({"error": type(ex).__name__, "message": str(ex)}), 400


def create_app(settings=None, container=None) -> Flask:
    """Application factory; tests may pass their own settings object or a prebuilt container."""
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)
    else:
        settings_module = getattr(settings, "__name__", type(settings).__name__)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        container = build_container(settings=settings)
        db = container.conn.config
        logger.info("[payroll-engine] settings=%s db=%s@%s:%s/%s", settings_module, db.user, db.host, db.port, db.database)

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.info("[payroll-engine] schema ready (tables=%s)", len(list_tables(container.conn)))

    register_error_handlers(app)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)

    return app
