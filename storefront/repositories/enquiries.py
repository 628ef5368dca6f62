from __future__ import annotations

from sqlalchemy.orm import selectinload

from storefront.extensions import db
from storefront.models.catalog import Product
from storefront.models.enquiry import Enquiry


def list_enquiries(product_hex_id: str | None = None) -> list[Enquiry]:
    stmt = (
        db.select(Enquiry)
        .options(selectinload(Enquiry.product))
        .order_by(Enquiry.created_at.desc(), Enquiry.id.desc())
    )
    if product_hex_id:
        stmt = stmt.join(Enquiry.product).where(Product.hex_id == product_hex_id)
    return list(db.session.execute(stmt).scalars())
