from __future__ import annotations

from flask import Blueprint

bp = Blueprint("api", __name__, url_prefix="/api")

# Route modules register themselves on `bp`
from storefront.blueprints.api import products  # noqa: E402,F401
from storefront.blueprints.api import categories  # noqa: E402,F401
from storefront.blueprints.api import enquiries  # noqa: E402,F401
