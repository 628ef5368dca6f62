from __future__ import annotations

from flask import jsonify, request

from storefront.blueprints.api import bp
from storefront.blueprints.helpers import enquiry_store, product_store, result_response
from storefront.blueprints.serializers import enquiry_json
from storefront.decorators import admin_required
from storefront.extensions import limiter
from storefront.repositories.enquiries import list_enquiries
from storefront.services import enquiries as enquiry_svc


@bp.post("/enquiries")
@limiter.limit("5 per minute; 50 per hour")
def enquiry_create():
    """Public: a visitor asks about a product."""
    result = enquiry_svc.create_enquiry(request.get_json(silent=True), enquiry_store(), product_store())
    return result_response(result, enquiry_json, status=201)


@bp.get("/enquiries")
@limiter.limit("60 per minute")
@admin_required
def enquiries_list():
    product_hex_id = request.args.get("product_id") or None
    return jsonify([enquiry_json(e) for e in list_enquiries(product_hex_id)])


@bp.get("/enquiries/<string:enquiry_hex_id>")
@limiter.limit("60 per minute")
@admin_required
def enquiry_detail(enquiry_hex_id: str):
    return result_response(enquiry_svc.get_enquiry(enquiry_hex_id, enquiry_store()), enquiry_json)


@bp.patch("/enquiries/<string:enquiry_hex_id>")
@limiter.limit("30 per minute")
@admin_required
def enquiry_update(enquiry_hex_id: str):
    result = enquiry_svc.update_enquiry(enquiry_hex_id, request.get_json(silent=True), enquiry_store())
    return result_response(result, enquiry_json)


@bp.delete("/enquiries/<string:enquiry_hex_id>")
@limiter.limit("10 per minute")
@admin_required
def enquiry_delete(enquiry_hex_id: str):
    return result_response(enquiry_svc.delete_enquiry(enquiry_hex_id, enquiry_store()))
