from __future__ import annotations

from flask import Blueprint, jsonify, request

from storefront.extensions import cache, limiter
from storefront.repositories.catalog import get_product_by_slug, list_categories, list_products
from storefront.blueprints.serializers import category_json, product_json

bp = Blueprint("catalog", __name__)


@bp.get("/")
@limiter.limit("120 per minute")
@cache.cached(query_string=True)
def home():
    """Public catalog, optionally filtered with ?category=<slug>."""
    category = (request.args.get("category") or "").strip() or None
    products = list_products(category_slug=category)
    return jsonify(
        {
            "products": [product_json(p) for p in products],
            "categories": [category_json(c) for c in list_categories()],
            "category": category,
            "total": len(products),
        }
    )


@bp.get("/product/<slug>", endpoint="product")
@limiter.limit("120 per minute")
def product_detail(slug: str):
    p = get_product_by_slug(slug)
    if not p:
        return jsonify({"error": "not_found", "message": "Product not found"}), 404
    return jsonify({"product": product_json(p, with_whatsapp=True)})
