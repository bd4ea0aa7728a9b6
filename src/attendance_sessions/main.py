from __future__ import annotations

import atexit
import importlib
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .common.http import error_response
from .common.logging_setup import configure_logging
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SWEEP_INTERVAL_SECONDS
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, list_tables
from .reports.controller import register as register_reports
from .sessions.controller import register as register_sessions
from .sessions.scheduler import SweepScheduler
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), log_file=getattr(settings, "LOG_FILE", None))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}})

    if container is None:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(
            db_config=db_config,
            auth_mode=getattr(settings, "AUTH_MODE", "enforced"),
            credential_scheme=getattr(settings, "CREDENTIAL_SCHEME", "hashed"),
        )

    if not container.policy.enforced:
        logger.warning(
            "AUTH_MODE=%s: teacher endpoints accept any caller. Set AUTH_MODE=enforced to require a teacher_id.",
            container.policy.mode.value,
        )

    container.teacher_service.ensure_default_teacher(
        getattr(settings, "DEFAULT_TEACHER_USERNAME", "admin"),
        getattr(settings, "DEFAULT_TEACHER_PASSWORD", "admin123"),
    )

    app.extensions["container"] = container

    register_students(app, container)
    register_teachers(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return error_response(exc)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        # HTTP errors (404 route, 405 method) keep their own response.
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "auth_mode": container.policy.mode.value})

    if getattr(settings, "START_SWEEPER", False):
        sweeper = SweepScheduler(
            container.lifecycle_service,
            interval_seconds=int(getattr(settings, "SWEEP_INTERVAL_SECONDS", DEFAULT_SWEEP_INTERVAL_SECONDS)),
        )
        sweeper.start()
        atexit.register(sweeper.shutdown)
        app.extensions["sweep_scheduler"] = sweeper

    return app


def main() -> None:
    app = create_app()
    # The reloader would fork a second process with its own sweeper.
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")), use_reloader=False)


if __name__ == "__main__":
    main()
