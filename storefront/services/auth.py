from __future__ import annotations

from datetime import datetime, timezone
from typing import Tuple

import structlog

from storefront.extensions import db
from storefront.models.user import User
from storefront.repositories.user import get_user_by_email, normalize_email
from storefront.utils.crypto import hash_password, verify_password

log = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def authenticate(email: str, password: str) -> Tuple[User | None, str | None]:
    """
    Check an email/password pair.
    Returns (user, error_message) tuple.
    """
    user = get_user_by_email(email)
    # Same message for unknown, wrong password and deactivated accounts
    if not user or not verify_password(password or "", user.password_hash) or not user.is_active:
        log.info("login_failed", email=normalize_email(email))
        return None, INVALID_CREDENTIALS

    user.last_login = datetime.now(timezone.utc)
    db.session.commit()
    log.info("login_succeeded", user=user.hex_id)
    return user, None


def create_admin(email: str, password: str) -> User | None:
    """Create an admin account; returns None when the email is taken."""
    if get_user_by_email(email):
        return None
    user = User(email=normalize_email(email), password_hash=hash_password(password), is_admin=True)
    db.session.add(user)
    db.session.commit()
    log.info("admin_created", user=user.hex_id)
    return user
