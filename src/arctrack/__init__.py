"""ArcTrack application factory."""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Iterable

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError

from .config import BaseConfig, DevConfig, TestConfig
from .errors import AppError, DatabaseError

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}

logger = logging.getLogger("arctrack.app")


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths registered on the app."""

    yield "arctrack.blueprints.daily"
    yield "arctrack.blueprints.stats"
    yield "arctrack.blueprints.profile"
    yield "arctrack.blueprints.reviews"


def create_app(config_name: str | None = None, *, config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = config or _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["ARCTRACK_CONFIG"] = config_obj

    from .logging_config import setup_logging

    setup_logging(config_obj)

    _register_blueprints(app)
    _register_error_handlers(app)

    # Imported lazily so that importing model classes does not pull in Flask wiring.
    from .extensions import init_db

    init_db(app)

    from . import cli as _cli

    _cli.init_app(app)

    if config_obj.SCHEDULER_ENABLED:
        from .scheduler import create_scheduler

        app.extensions["arctrack_scheduler"] = create_scheduler(app, auto_start=True)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        level = logging.ERROR if exc.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "Request failed: %s",
            exc.message,
            extra={"code": exc.code, "status": exc.status_code},
        )
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(SQLAlchemyError)
    def _handle_database_error(exc: SQLAlchemyError):
        logger.error("Database error: %s", exc, exc_info=True)
        error = DatabaseError("Database operation failed")
        return jsonify(error.to_dict()), error.status_code


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
