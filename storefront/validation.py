"""Business-rule validation for product and category records.

Rules are evaluated in a fixed order and the first violation is raised as a
:class:`~storefront.errors.ValidationError`. Callers rely on the message of
that first violation, so the order below is part of the contract. Nothing
here touches the store; checks that need a lookup (category name
uniqueness) belong to the services.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from storefront.errors import ValidationError

CATEGORY_NAME_MAX_LENGTH = 100
CATEGORY_DESCRIPTION_MAX_LENGTH = 500


@dataclass(frozen=True)
class ProductConstraints:
    name_max_length: int = 200
    description_max_length: int = 5000
    min_price: float = 0.01
    max_images: int = 5

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "ProductConstraints":
        return cls(
            name_max_length=int(config.get("PRODUCT_NAME_MAX_LENGTH", cls.name_max_length)),
            description_max_length=int(
                config.get("PRODUCT_DESCRIPTION_MAX_LENGTH", cls.description_max_length)
            ),
            min_price=float(config.get("PRODUCT_MIN_PRICE", cls.min_price)),
            max_images=int(config.get("PRODUCT_MAX_IMAGES", cls.max_images)),
        )


DEFAULT_PRODUCT_CONSTRAINTS = ProductConstraints()


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return math.isfinite(value)


def _trimmed(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_product_input(
    data: Mapping[str, Any],
    constraints: ProductConstraints = DEFAULT_PRODUCT_CONSTRAINTS,
) -> None:
    """Raise ValidationError for the first product rule ``data`` violates."""
    min_price = f"{constraints.min_price:g}"

    name = _trimmed(data.get("name"))
    if not name:
        raise ValidationError("Product name is required", field="name")
    if len(name) > constraints.name_max_length:
        raise ValidationError(
            f"Product name must be less than {constraints.name_max_length} characters",
            field="name",
        )

    description = _trimmed(data.get("description"))
    if not description:
        raise ValidationError("Product description is required", field="description")
    if len(description) > constraints.description_max_length:
        raise ValidationError(
            f"Product description must be less than {constraints.description_max_length} characters",
            field="description",
        )

    price = data.get("price")
    if price is None:
        raise ValidationError("Product price is required", field="price")
    if not _is_number(price) or price < constraints.min_price:
        raise ValidationError(f"Price must be at least {min_price}", field="price")

    offer_price = data.get("offer_price")
    if offer_price is not None:
        if not _is_number(offer_price) or offer_price < constraints.min_price:
            raise ValidationError(f"Offer price must be at least {min_price}", field="offer_price")
        if offer_price >= price:
            raise ValidationError("Offer price must be less than regular price", field="offer_price")

    images = data.get("images")
    if not isinstance(images, (list, tuple)) or len(images) == 0:
        raise ValidationError("At least one image is required", field="images")
    if len(images) > constraints.max_images:
        raise ValidationError(f"Maximum {constraints.max_images} images allowed", field="images")
    for image in images:
        if not isinstance(image, str) or not image.strip():
            raise ValidationError("All images must be valid URLs", field="images")


def validate_category_input(data: Mapping[str, Any]) -> None:
    """Raise ValidationError for the first category rule ``data`` violates."""
    name = _trimmed(data.get("name"))
    if not name:
        raise ValidationError("Category name is required", field="name")
    if len(name) > CATEGORY_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Category name must be less than {CATEGORY_NAME_MAX_LENGTH} characters",
            field="name",
        )

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise ValidationError("Category description must be text", field="description")
    if description and len(description.strip()) > CATEGORY_DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Category description must be less than {CATEGORY_DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
