from __future__ import annotations

from flask import jsonify, request

from storefront.blueprints.api import bp
from storefront.blueprints.helpers import (
    category_store,
    invalidate_catalog_cache,
    result_response,
    slug_retries,
)
from storefront.blueprints.serializers import category_json
from storefront.decorators import admin_required
from storefront.extensions import cache, limiter
from storefront.repositories.catalog import count_products_in_category, list_categories
from storefront.services import catalog as catalog_svc


def _with_count(cat) -> dict:
    data = category_json(cat)
    data["product_count"] = count_products_in_category(cat)
    return data


@bp.get("/categories")
@limiter.limit("120 per minute")
@cache.cached()
def categories_list():
    """Public: every category, by name."""
    return jsonify([category_json(c) for c in list_categories()])


@bp.get("/categories/<string:category_hex_id>")
@limiter.limit("120 per minute")
def category_detail(category_hex_id: str):
    """Public: one category with its product count."""
    return result_response(catalog_svc.get_category(category_hex_id, category_store()), _with_count)


@bp.post("/categories")
@limiter.limit("10 per minute; 150 per hour")
@admin_required
def category_create():
    result = catalog_svc.create_category(
        request.get_json(silent=True), category_store(), slug_retries=slug_retries()
    )
    if result.ok:
        invalidate_catalog_cache()
    return result_response(result, category_json, status=201)


@bp.put("/categories/<string:category_hex_id>")
@limiter.limit("10 per minute; 150 per hour")
@admin_required
def category_update(category_hex_id: str):
    result = catalog_svc.update_category(
        category_hex_id, request.get_json(silent=True), category_store(), slug_retries=slug_retries()
    )
    if result.ok:
        invalidate_catalog_cache()
    return result_response(result, category_json)


@bp.delete("/categories/<string:category_hex_id>")
@limiter.limit("5 per minute")
@admin_required
def category_delete(category_hex_id: str):
    result = catalog_svc.delete_category(category_hex_id, category_store())
    if result.ok:
        invalidate_catalog_cache()
    return result_response(result)
