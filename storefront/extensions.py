from __future__ import annotations

from flask_caching import Cache
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf import CSRFProtect

db: SQLAlchemy = SQLAlchemy()
migrate: Migrate = Migrate()

login_manager: LoginManager = LoginManager()

csrf: CSRFProtect = CSRFProtect()

# Public catalog reads; cleared on every admin catalog write
cache: Cache = Cache()

# Per-IP limits; the default comes from RATELIMIT_DEFAULT
limiter: Limiter = Limiter(key_func=get_remote_address)
