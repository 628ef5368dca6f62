"""Customer enquiries raised from the product page."""
from __future__ import annotations

from typing import Any

import structlog

from storefront.errors import NotFoundError, StoreError, ValidationError
from storefront.models.catalog import Product
from storefront.models.enquiry import Enquiry, EnquiryStatus
from storefront.repositories.store import TableStore
from storefront.result import returns_result
from storefront.schemas import EnquiryCreate, EnquiryUpdate, parse_payload

log = structlog.get_logger(__name__)


@returns_result
def create_enquiry(data: Any, enquiries: TableStore[Enquiry], products: TableStore[Product]) -> Enquiry:
    payload = parse_payload(EnquiryCreate, data)
    if not payload.product_id:
        raise ValidationError("Product ID is required", field="product_id")

    product = products.first(hex_id=payload.product_id)
    if product is None:
        raise NotFoundError("Product not found")

    enquiry = enquiries.insert(
        {
            "product_id": product.id,
            "status": EnquiryStatus.PENDING.value,
            "description": payload.description,
            "customer_name": payload.customer_name,
            "customer_phone": payload.customer_phone,
            "customer_email": payload.customer_email,
        }
    )
    log.info("enquiry_created", hex_id=enquiry.hex_id, product=product.hex_id)
    return enquiry


@returns_result
def get_enquiry(hex_id: str, enquiries: TableStore[Enquiry]) -> Enquiry:
    enquiry = enquiries.first(hex_id=hex_id)
    if enquiry is None:
        raise NotFoundError("Enquiry not found")
    return enquiry


@returns_result
def update_enquiry(hex_id: str, data: Any, enquiries: TableStore[Enquiry]) -> Enquiry:
    patch = parse_payload(EnquiryUpdate, data).to_patch()
    try:
        enquiry = enquiries.update({"hex_id": hex_id}, patch)
    except StoreError as e:
        if e.code == StoreError.NOT_FOUND:
            raise NotFoundError("Enquiry not found") from e
        raise
    log.info("enquiry_updated", hex_id=hex_id, fields=sorted(patch))
    return enquiry


@returns_result
def delete_enquiry(hex_id: str, enquiries: TableStore[Enquiry]) -> None:
    try:
        enquiries.delete({"hex_id": hex_id})
    except StoreError as e:
        if e.code == StoreError.NOT_FOUND:
            raise NotFoundError("Enquiry not found") from e
        raise
    log.info("enquiry_deleted", hex_id=hex_id)
