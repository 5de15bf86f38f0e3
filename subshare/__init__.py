"""SubShare application factory and bootstrap."""

from __future__ import annotations

import os
from typing import Optional

from flask import Flask, Response

from subshare.config import config_by_name
from subshare.errors import ConfigMissing, StoreUnavailable
from subshare.extensions import init_extensions


def create_app(config_name: Optional[str] = None, **overrides) -> Flask:
    """Create and configure the SubShare Flask application.

    ``overrides`` are applied on top of the selected config class, mainly so
    tests and the serve command can adjust single keys.
    """
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()

    app = Flask(__name__)
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    app.config.update(overrides)

    if not app.config.get("SESSION_COOKIE_DOMAIN"):
        raise ConfigMissing("SESSION_COOKIE_DOMAIN")
    if not app.config.get("LOGIN_REDIRECT_URL"):
        raise ConfigMissing("LOGIN_REDIRECT_URL")

    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    app.logger.info(
        "subshare ready env=%s cookie_domain=%s redirect=%s",
        env_name,
        app.config["SESSION_COOKIE_DOMAIN"],
        app.config["LOGIN_REDIRECT_URL"],
    )
    return app


def _register_blueprints(app: Flask) -> None:
    from subshare.core.demo.controllers import create_demo_bp  # local import to avoid circulars

    app.register_blueprint(
        create_demo_bp(
            app.extensions["session_store"],
            app.extensions["cookie_serializer"],
            app.extensions["demo_settings"],
        )
    )


def _register_error_handlers(app: Flask) -> None:
    """Store failures become bare 500s; other HTTP errors get JSON bodies."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(StoreUnavailable)
    def _store_error(exc: StoreUnavailable):
        app.logger.exception("Session store failure: %s", exc)
        return Response(status=500)

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
