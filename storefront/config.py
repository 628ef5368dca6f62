from __future__ import annotations

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def default_cache_type(env: str) -> str:
    return "FileSystemCache" if env == "production" else "SimpleCache"


class Config:
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.urandom(32).hex())

    # Database
    SQLALCHEMY_DATABASE_URI: str | None = os.getenv("DATABASE_URL", "sqlite:///storefront.db")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Product rules
    PRODUCT_NAME_MAX_LENGTH = int(os.getenv("PRODUCT_NAME_MAX_LENGTH", "200"))
    PRODUCT_DESCRIPTION_MAX_LENGTH = int(os.getenv("PRODUCT_DESCRIPTION_MAX_LENGTH", "5000"))
    PRODUCT_MIN_PRICE = float(os.getenv("PRODUCT_MIN_PRICE", "0.01"))
    PRODUCT_MAX_IMAGES = int(os.getenv("PRODUCT_MAX_IMAGES", "5"))

    # Attempts at picking a fresh slug after the store reports a unique violation
    SLUG_CONFLICT_RETRIES = int(os.getenv("SLUG_CONFLICT_RETRIES", "3"))

    # Enquiries are sent to this number (country code, no "+")
    WHATSAPP_PHONE_NUMBER = os.getenv("WHATSAPP_PHONE_NUMBER", "7418769579")

    # Sessions
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.getenv("FLASK_ENV", "production") == "production"
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_LIFETIME_MINUTES = int(os.getenv("SESSION_LIFETIME_MINUTES", "240"))

    # Request bodies are JSON only; media lives in external storage
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(1024 * 1024)))

    # JSON clients fetch a token from /auth/csrf and send it as X-CSRFToken
    WTF_CSRF_TIME_LIMIT = None

    # Caching for public catalog reads. SimpleCache lives in one process, so a
    # catalog write would only clear the worker that handled it; production
    # defaults to a directory shared by all gunicorn workers on the host
    CACHE_TYPE = os.getenv("CACHE_TYPE", default_cache_type(os.getenv("FLASK_ENV", "production")))
    CACHE_DIR = os.getenv("CACHE_DIR", os.path.join(tempfile.gettempdir(), "storefront-cache"))
    CACHE_DEFAULT_TIMEOUT = int(os.getenv("CACHE_DEFAULT_TIMEOUT", "60"))

    # Rate limiting
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Security headers
    SECURITY_CSP = (
        "default-src 'none'; "
        "img-src 'self' https:; "
        "frame-ancestors 'none'; "
        "base-uri 'none'"
    )
    SECURITY_HSTS_SECONDS = 31536000
    SECURITY_PERMISSIONS_POLICY = (
        "geolocation=(), microphone=(), camera=(), payment=(), usb=(), "
        "magnetometer=(), gyroscope=(), accelerometer=()"
    )

    # Flask env
    ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = ENV != "production"
