from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, request

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_PORT, DEFAULT_STUDENTS_FILE, DEFAULT_SUBJECTS
from .core.exceptions import MalformedDataError, NotFoundError, StoreNotFoundError, ValidationError
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _plain_text(body: str, status: int):
    return body, status, {"Content-Type": "text/plain; charset=utf-8"}


def _register_request_logger(app: Flask) -> None:
    @app.before_request
    def log_request():
        logger.info("%s %s", request.method, request.full_path.rstrip("?"))


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _plain_text(str(e), 404)

    @app.errorhandler(StoreNotFoundError)
    def handle_store_missing(e: StoreNotFoundError):
        logger.error("%s", e)
        return _plain_text("Student store is unavailable.", 500)

    @app.errorhandler(MalformedDataError)
    def handle_malformed(e: MalformedDataError):
        logger.error("Refusing to serve corrupted student store: %s", e)
        return _plain_text("Student store is corrupted.", 500)

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        # User-visible message, served as 200 like the subject-selection error.
        return _plain_text(str(e), 200)


def create_app(overrides: Optional[dict[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    overrides = dict(overrides or {})

    def setting(name: str, default: Any = None) -> Any:
        if name in overrides:
            return overrides[name]
        return getattr(settings, name, default)

    logging.basicConfig(level=str(setting("LOG_LEVEL", "INFO")).upper(), format=LOG_FORMAT)

    app.secret_key = setting("SECRET_KEY")
    app.config["DEBUG"] = bool(setting("DEBUG", False))
    app.config["TESTING"] = bool(setting("TESTING", False))
    app.config["STUDENTS_FILE"] = str(setting("STUDENTS_FILE", DEFAULT_STUDENTS_FILE))
    app.config["SUBJECTS"] = tuple(setting("SUBJECTS", DEFAULT_SUBJECTS))
    app.config["HOST"] = setting("HOST", "127.0.0.1")
    app.config["PORT"] = int(setting("PORT", DEFAULT_PORT))

    logger.info(
        "settings=%s store=%s subjects=%s",
        settings_module,
        app.config["STUDENTS_FILE"],
        ",".join(app.config["SUBJECTS"]),
    )

    container = setting("CONTAINER") or build_container(
        students_file=app.config["STUDENTS_FILE"],
        subjects=app.config["SUBJECTS"],
        missing_ok=bool(setting("STORE_MISSING_OK", True)),
    )

    _register_request_logger(app)
    _register_error_handlers(app)

    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
