from __future__ import annotations

from datetime import datetime
from typing import Any

from flask import current_app

from storefront.models import Category, Enquiry, Product
from storefront.utils.whatsapp import display_price, generate_whatsapp_url, primary_image


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def category_json(cat: Category) -> dict[str, Any]:
    return {
        "id": cat.hex_id,
        "name": cat.name,
        "slug": cat.slug,
        "description": cat.description,
        "created_at": _iso(cat.created_at),
        "updated_at": _iso(cat.updated_at),
    }


def product_json(p: Product, *, with_whatsapp: bool = False) -> dict[str, Any]:
    data = {
        "id": p.hex_id,
        "slug": p.slug,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "offer_price": p.offer_price,
        "display_price": display_price(p),
        "images": list(p.images or []),
        "primary_image": primary_image(p),
        "video_url": p.video_url,
        "category": {
            "id": p.category.hex_id,
            "name": p.category.name,
            "slug": p.category.slug,
        } if p.category else None,
        "created_at": _iso(p.created_at),
        "updated_at": _iso(p.updated_at),
    }
    if with_whatsapp:
        data["whatsapp_url"] = generate_whatsapp_url(p, current_app.config["WHATSAPP_PHONE_NUMBER"])
    return data


def enquiry_json(e: Enquiry) -> dict[str, Any]:
    p = e.product
    return {
        "id": e.hex_id,
        "product_id": p.hex_id if p else None,
        "status": e.status,
        "description": e.description,
        "customer_name": e.customer_name,
        "customer_phone": e.customer_phone,
        "customer_email": e.customer_email,
        "notes": e.notes,
        "created_at": _iso(e.created_at),
        "updated_at": _iso(e.updated_at),
        "product": {
            "id": p.hex_id,
            "name": p.name,
            "slug": p.slug,
            "price": p.price,
            "offer_price": p.offer_price,
        } if p else None,
    }
