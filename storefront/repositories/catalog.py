from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import selectinload

from storefront.extensions import db
from storefront.models.catalog import Category, Product


# Category repositories
def list_categories() -> list[Category]:
    return list(db.session.execute(db.select(Category).order_by(Category.name)).scalars())


def get_category_by_slug(slug: str) -> Optional[Category]:
    return db.session.execute(db.select(Category).filter_by(slug=slug)).scalar_one_or_none()


def count_products_in_category(category: Category) -> int:
    return db.session.execute(
        db.select(db.func.count(Product.id)).filter_by(category_id=category.id)
    ).scalar_one()


# Product repositories
def list_products(category_slug: str | None = None) -> list[Product]:
    """Newest first, optionally restricted to one category.

    An unknown category slug yields an empty list rather than all products.
    """
    stmt = (
        db.select(Product)
        .options(selectinload(Product.category))
        .order_by(Product.created_at.desc(), Product.id.desc())
    )
    if category_slug:
        cat = get_category_by_slug(category_slug)
        if not cat:
            return []
        stmt = stmt.filter_by(category_id=cat.id)
    return list(db.session.execute(stmt).scalars())


def get_product_by_slug(slug: str) -> Optional[Product]:
    return db.session.execute(db.select(Product).filter_by(slug=slug)).scalar_one_or_none()
