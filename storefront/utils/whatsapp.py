"""Product presentation helpers and the WhatsApp enquiry link."""
from __future__ import annotations

from typing import Any
from urllib.parse import quote

PLACEHOLDER_IMAGE = "https://via.placeholder.com/800x800?text=No+Image"
WHATSAPP_BASE_URL = "https://wa.me"
DESCRIPTION_PREVIEW_LENGTH = 100


def display_price(product: Any) -> float:
    """Offer price when one is set, otherwise the regular price."""
    offer = getattr(product, "offer_price", None)
    return float(offer if offer is not None else product.price)


def product_images(product: Any) -> list[str]:
    return list(getattr(product, "images", None) or [])


def primary_image(product: Any) -> str:
    images = product_images(product)
    return images[0] if images else PLACEHOLDER_IMAGE


def whatsapp_message(product: Any) -> str:
    preview = (product.description or "")[:DESCRIPTION_PREVIEW_LENGTH]
    return f"Hi! I'm interested in {product.name} - {preview}... Price: ₹{display_price(product):.2f}"


def generate_whatsapp_url(product: Any, phone_number: str) -> str:
    """
    Build a wa.me link that opens a chat pre-filled with the product details.

    Args:
        product: Anything with name, description, price and offer_price
        phone_number: Destination number with country code, no "+"

    Returns:
        The WhatsApp URL
    """
    # Punctuation common in product copy stays readable in the chat preview
    encoded = quote(whatsapp_message(product), safe="-_.!~*'()")
    return f"{WHATSAPP_BASE_URL}/{phone_number}?text={encoded}"
