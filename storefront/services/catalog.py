"""Product and category write paths.

Each operation validates its input, resolves a slug that is unique within
the collection and persists through the ``TableStore`` it is handed. The
slug snapshot can go stale between the read and the write; the unique
constraint on ``slug`` catches that and the write is retried with a fresh
snapshot a bounded number of times.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

import structlog

from storefront.errors import NotFoundError, StoreError, ValidationError
from storefront.models.catalog import Category, Product
from storefront.repositories.store import TableStore
from storefront.result import returns_result
from storefront.schemas import (
    CategoryFields,
    CategoryPayload,
    ProductFields,
    ProductPayload,
    parse_payload,
)
from storefront.utils.slug import fallback_slug, generate_slug, generate_unique_slug
from storefront.validation import (
    DEFAULT_PRODUCT_CONSTRAINTS,
    ProductConstraints,
    validate_category_input,
    validate_product_input,
)

log = structlog.get_logger(__name__)

DEFAULT_SLUG_RETRIES = 3
# Kept free at the end of the slug column for the "-N" uniqueness suffix
SLUG_SUFFIX_ROOM = 20

R = TypeVar("R")


def resolve_slug(
    store: TableStore[Any],
    *,
    requested: str | None,
    name: str,
    exclude: Iterable[str] = (),
) -> str:
    """Pick a collection-unique slug from an explicit slug or the display name."""
    candidate = generate_slug(requested) or generate_slug(name)
    if not candidate:
        candidate = fallback_slug()
        log.info("slug_fallback", table=store.model.__tablename__, name=name, slug=candidate)
    column_length = store.model.__table__.c.slug.type.length
    if column_length:
        candidate = candidate[: column_length - SLUG_SUFFIX_ROOM].rstrip("-")
    existing = store.column_values("slug", exclude=exclude)
    return generate_unique_slug(candidate, existing)


def write_with_unique_slug(
    store: TableStore[Any],
    write: Callable[[str], R],
    *,
    requested: str | None,
    name: str,
    exclude: Iterable[str] = (),
    retries: int = DEFAULT_SLUG_RETRIES,
) -> R:
    exclude = set(exclude)
    attempt = 0
    while True:
        slug = resolve_slug(store, requested=requested, name=name, exclude=exclude)
        try:
            return write(slug)
        except StoreError as e:
            if e.code != StoreError.UNIQUE_VIOLATION or attempt >= retries:
                raise
            attempt += 1
            log.warning(
                "slug_conflict_retry",
                table=store.model.__tablename__,
                slug=slug,
                attempt=attempt,
            )


def _resolve_category_id(categories: TableStore[Category], hex_id: str | None) -> int | None:
    if not hex_id:
        return None
    cat = categories.first(hex_id=hex_id)
    if cat is None:
        raise ValidationError("Category does not exist", field="category_id")
    return cat.id


def _product_fields(payload: ProductPayload, category_id: int | None) -> dict[str, Any]:
    return {
        "name": payload.name,
        "description": payload.description,
        "price": payload.price,
        "offer_price": payload.offer_price,
        "images": list(payload.images or []),
        "video_url": payload.video_url,
        "category_id": category_id,
    }


# Products
@returns_result
def list_products(products: TableStore[Product]) -> list[Product]:
    return products.select(order_by=(Product.created_at.desc(), Product.id.desc()))


@returns_result
def get_product(hex_id: str, products: TableStore[Product]) -> Product:
    product = products.first(hex_id=hex_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@returns_result
def create_product(
    data: Any,
    products: TableStore[Product],
    categories: TableStore[Category],
    *,
    constraints: ProductConstraints = DEFAULT_PRODUCT_CONSTRAINTS,
    slug_retries: int = DEFAULT_SLUG_RETRIES,
) -> Product:
    validate_product_input(parse_payload(ProductFields, data).to_record(), constraints)
    payload = parse_payload(ProductPayload, data)
    fields = _product_fields(payload, _resolve_category_id(categories, payload.category_id))

    product = write_with_unique_slug(
        products,
        lambda slug: products.insert({**fields, "slug": slug}),
        requested=payload.slug,
        name=payload.name,
        retries=slug_retries,
    )
    log.info("product_created", hex_id=product.hex_id, slug=product.slug)
    return product


@returns_result
def update_product(
    hex_id: str,
    data: Any,
    products: TableStore[Product],
    categories: TableStore[Category],
    *,
    constraints: ProductConstraints = DEFAULT_PRODUCT_CONSTRAINTS,
    slug_retries: int = DEFAULT_SLUG_RETRIES,
) -> Product:
    """Replace a product's fields.

    The slug changes only when the body carries an explicit ``slug`` or sets
    ``regenerate_slug``; renaming alone keeps existing links working.
    """
    validate_product_input(parse_payload(ProductFields, data).to_record(), constraints)
    payload = parse_payload(ProductPayload, data)

    current = products.first(hex_id=hex_id)
    if current is None:
        raise NotFoundError("Product not found")
    fields = _product_fields(payload, _resolve_category_id(categories, payload.category_id))

    if not payload.slug and not payload.regenerate_slug:
        product = products.update({"hex_id": hex_id}, fields)
    else:
        product = write_with_unique_slug(
            products,
            lambda slug: products.update({"hex_id": hex_id}, {**fields, "slug": slug}),
            requested=payload.slug,
            name=payload.name,
            exclude={current.slug},
            retries=slug_retries,
        )
    log.info("product_updated", hex_id=product.hex_id, slug=product.slug)
    return product


@returns_result
def delete_product(hex_id: str, products: TableStore[Product]) -> None:
    if products.first(hex_id=hex_id) is None:
        raise NotFoundError("Product not found")
    # Media files live in external storage and are left in place
    products.delete({"hex_id": hex_id})
    log.info("product_deleted", hex_id=hex_id)


# Categories
def _ensure_unique_name(categories: TableStore[Category], name: str, *, exclude_id: int | None = None) -> None:
    clash = categories.first(name=name)
    if clash is not None and clash.id != exclude_id:
        raise ValidationError("Category with this name already exists", field="name")


@returns_result
def get_category(hex_id: str, categories: TableStore[Category]) -> Category:
    cat = categories.first(hex_id=hex_id)
    if cat is None:
        raise NotFoundError("Category not found")
    return cat


@returns_result
def create_category(
    data: Any,
    categories: TableStore[Category],
    *,
    slug_retries: int = DEFAULT_SLUG_RETRIES,
) -> Category:
    validate_category_input(parse_payload(CategoryFields, data).to_record())
    payload = parse_payload(CategoryPayload, data)
    name = payload.name

    def insert(slug: str) -> Category:
        # Re-checked on every attempt: a unique violation may come from the name
        _ensure_unique_name(categories, name)
        return categories.insert({"name": name, "slug": slug, "description": payload.description})

    cat = write_with_unique_slug(
        categories, insert, requested=payload.slug, name=name, retries=slug_retries
    )
    log.info("category_created", hex_id=cat.hex_id, slug=cat.slug)
    return cat


@returns_result
def update_category(
    hex_id: str,
    data: Any,
    categories: TableStore[Category],
    *,
    slug_retries: int = DEFAULT_SLUG_RETRIES,
) -> Category:
    validate_category_input(parse_payload(CategoryFields, data).to_record())
    payload = parse_payload(CategoryPayload, data)

    current = categories.first(hex_id=hex_id)
    if current is None:
        raise NotFoundError("Category not found")
    current_id = current.id
    fields = {"name": payload.name, "description": payload.description}

    def update(slug: str | None) -> Category:
        _ensure_unique_name(categories, payload.name, exclude_id=current_id)
        patch = fields if slug is None else {**fields, "slug": slug}
        return categories.update({"hex_id": hex_id}, patch)

    if not payload.slug and not payload.regenerate_slug:
        cat = update(None)
    else:
        cat = write_with_unique_slug(
            categories,
            update,
            requested=payload.slug,
            name=payload.name,
            exclude={current.slug},
            retries=slug_retries,
        )
    log.info("category_updated", hex_id=cat.hex_id, slug=cat.slug)
    return cat


@returns_result
def delete_category(hex_id: str, categories: TableStore[Category]) -> None:
    if categories.first(hex_id=hex_id) is None:
        raise NotFoundError("Category not found")
    # Products of the category become uncategorised, see Category.products
    categories.delete({"hex_id": hex_id})
    log.info("category_deleted", hex_id=hex_id)
