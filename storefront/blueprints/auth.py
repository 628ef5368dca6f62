from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required, login_user, logout_user
from flask_wtf.csrf import generate_csrf

from storefront.blueprints.helpers import result_response
from storefront.errors import UnauthorizedError
from storefront.extensions import limiter
from storefront.result import Err
from storefront.services import auth as auth_svc

bp = Blueprint("auth", __name__)


@bp.get("/csrf")
def csrf_token():
    """Token for JSON clients; send it back in the X-CSRFToken header."""
    return jsonify({"csrf_token": generate_csrf()})


@bp.post("/login")
@limiter.limit("5 per minute; 20 per hour")
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    user, error_message = auth_svc.authenticate(str(data.get("email") or ""), str(data.get("password") or ""))
    if not user:
        return result_response(Err.from_exception(UnauthorizedError(error_message)))

    login_user(user, remember=False)
    return jsonify({"status": "ok", "user": {"id": user.hex_id, "email": user.email, "is_admin": user.is_admin}})


@bp.post("/logout")
@login_required
def logout():
    logout_user()
    return jsonify({"status": "ok"})


@bp.get("/me")
@login_required
def me():
    return jsonify({"id": current_user.hex_id, "email": current_user.email, "is_admin": current_user.is_admin})
