from __future__ import annotations

import secrets


def generate_hex_id(length: int = 32) -> str:
    """Generate a secure random hex string of specified length."""
    return secrets.token_hex(length // 2)


from storefront.models.user import User  # noqa: E402
from storefront.models.catalog import Category, Product  # noqa: E402
from storefront.models.enquiry import Enquiry, EnquiryStatus  # noqa: E402

__all__ = [
    "generate_hex_id",
    "User",
    "Category",
    "Product",
    "Enquiry",
    "EnquiryStatus",
]
