from __future__ import annotations

from flask import request

from storefront.blueprints.api import bp
from storefront.blueprints.helpers import (
    category_store,
    invalidate_catalog_cache,
    product_constraints,
    product_store,
    result_response,
    slug_retries,
)
from storefront.blueprints.serializers import product_json
from storefront.decorators import admin_required
from storefront.extensions import limiter
from storefront.services import catalog as catalog_svc


@bp.get("/products")
@limiter.limit("60 per minute")
@admin_required
def list_products():
    result = catalog_svc.list_products(product_store())
    return result_response(result, lambda rows: [product_json(p) for p in rows])


@bp.post("/products")
@limiter.limit("10 per minute; 150 per hour")
@admin_required
def create_product():
    result = catalog_svc.create_product(
        request.get_json(silent=True),
        product_store(),
        category_store(),
        constraints=product_constraints(),
        slug_retries=slug_retries(),
    )
    if result.ok:
        invalidate_catalog_cache()
    return result_response(result, product_json, status=201)


@bp.get("/products/<string:product_hex_id>")
@limiter.limit("60 per minute")
@admin_required
def get_product(product_hex_id: str):
    return result_response(catalog_svc.get_product(product_hex_id, product_store()), product_json)


@bp.put("/products/<string:product_hex_id>")
@limiter.limit("10 per minute; 150 per hour")
@admin_required
def update_product(product_hex_id: str):
    result = catalog_svc.update_product(
        product_hex_id,
        request.get_json(silent=True),
        product_store(),
        category_store(),
        constraints=product_constraints(),
        slug_retries=slug_retries(),
    )
    if result.ok:
        invalidate_catalog_cache()
    return result_response(result, product_json)


@bp.delete("/products/<string:product_hex_id>")
@limiter.limit("5 per minute")
@admin_required
def delete_product(product_hex_id: str):
    result = catalog_svc.delete_product(product_hex_id, product_store())
    if result.ok:
        invalidate_catalog_cache()
    return result_response(result)
