from __future__ import annotations

from typing import Any, Callable, Type

from flask import Response, current_app, jsonify

from storefront.extensions import cache, db
from storefront.models import Category, Enquiry, Product
from storefront.repositories.store import TableStore
from storefront.result import Err, Result, error_body, status_for
from storefront.validation import ProductConstraints


def table_store(model: Type[Any]) -> TableStore[Any]:
    return TableStore(db.session, model)


def product_store() -> TableStore[Product]:
    return table_store(Product)


def category_store() -> TableStore[Category]:
    return table_store(Category)


def enquiry_store() -> TableStore[Enquiry]:
    return table_store(Enquiry)


def product_constraints() -> ProductConstraints:
    return ProductConstraints.from_config(current_app.config)


def slug_retries() -> int:
    return int(current_app.config.get("SLUG_CONFLICT_RETRIES", 3))


def invalidate_catalog_cache() -> None:
    # Public listings are cached; any catalog write makes them stale
    cache.clear()


def result_response(
    result: Result[Any],
    serialize: Callable[[Any], Any] | None = None,
    status: int = 200,
) -> tuple[Response, int]:
    """Map a service result to a JSON response."""
    if isinstance(result, Err):
        return jsonify(error_body(result)), status_for(result)
    body = serialize(result.value) if serialize else {"success": True}
    return jsonify(body), status
