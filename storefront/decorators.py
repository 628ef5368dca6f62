from __future__ import annotations

from functools import wraps
from typing import Callable, Any

from flask import jsonify
from flask_login import current_user, login_required


def admin_required(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Reject anonymous callers with 401 and non-admins with 403.

    Runs before the view body, so no validation or slug work happens for
    rejected requests.
    """
    @wraps(fn)
    @login_required
    def wrapper(*args, **kwargs):
        if not getattr(current_user, "is_admin", False):
            return jsonify({"error": "forbidden", "message": "admin required"}), 403
        return fn(*args, **kwargs)

    return wrapper
