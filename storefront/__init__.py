from __future__ import annotations

import logging
import os
from datetime import timedelta
from typing import Any, Dict

import click
from flask import Flask, current_app, g, jsonify, request
from werkzeug.exceptions import HTTPException

from storefront.config import Config
from storefront.errors import UnauthorizedError
from storefront.extensions import (
    db,
    migrate,
    login_manager,
    csrf,
    limiter,
    cache,
)
from storefront.logging_config import bind_request_context, configure_logging
from storefront.result import Err
from storefront.security import apply_security_headers
from storefront.models import User  # ensure models imported for migrations


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)

    app.permanent_session_lifetime = timedelta(minutes=int(app.config.get("SESSION_LIFETIME_MINUTES", 240)))

    configure_logging(logging.DEBUG if app.debug else logging.INFO)

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    cache.init_app(app)
    limiter.init_app(app)

    @login_manager.user_loader
    def load_user(user_id: str) -> User | None:
        try:
            from storefront.repositories.user import get_user_by_id
            from storefront.utils.db_retry import safe_db_operation
            return safe_db_operation(get_user_by_id, int(user_id))
        except Exception as e:
            current_app.logger.error(f"Error loading user {user_id}: {str(e)}")
            return None

    @login_manager.unauthorized_handler
    def unauthorized_json():
        from storefront.blueprints.helpers import result_response

        return result_response(Err.from_exception(UnauthorizedError()))

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()
        bind_request_context(g.request_id, request.method, request.path)

    @app.after_request
    def set_headers(resp):
        resp.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return apply_security_headers(resp)

    # Blueprints
    from storefront.blueprints.auth import bp as auth_bp
    from storefront.blueprints.catalog import bp as catalog_bp
    from storefront.blueprints.api import bp as api_bp

    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(catalog_bp)
    app.register_blueprint(api_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db.session.rollback()
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    _register_error_handlers(app)

    # CLI: create admin user
    @app.cli.command("create-admin")
    @click.option("--email", prompt=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(email: str, password: str) -> None:
        from storefront.services.auth import create_admin as create_admin_user

        if create_admin_user(email, password) is None:
            click.echo("User already exists")
            return
        click.echo("Admin user created")

    # CLI: create tables without running migrations (local development)
    @app.cli.command("init-db")
    def init_db() -> None:
        db.create_all()
        click.echo("Database tables created")

    return app


# HTTP errors raised outside the service layer (routing, limits, aborts)
HTTP_ERRORS = {
    400: ("bad_request", "bad request"),
    401: ("unauthorized", "Unauthorized"),
    403: ("forbidden", "forbidden"),
    404: ("not_found", "resource not found"),
    405: ("method_not_allowed", "method not allowed"),
    413: ("payload_too_large", "request body too large"),
    429: ("rate_limited", "too many requests"),
    500: ("server_error", "internal server error"),
}


def _register_error_handlers(app: Flask) -> None:
    def make_handler(status: int, error: str, message: str):
        def handler(e: HTTPException):
            if status == 500:
                current_app.logger.error(f"Unhandled error on {request.path}: {e}")
            elif status == 400 and getattr(e, "description", None):
                # Flask's own 400s carry a useful description (e.g. CSRF failures)
                return jsonify({"error": error, "message": e.description}), status
            return jsonify({"error": error, "message": message}), status

        return handler

    for status, (error, message) in HTTP_ERRORS.items():
        app.register_error_handler(status, make_handler(status, error, message))
