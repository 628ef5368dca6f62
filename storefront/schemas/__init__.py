from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from storefront.errors import ValidationError

from .categories import CategoryFields, CategoryPayload  # noqa: F401
from .enquiries import EnquiryCreate, EnquiryUpdate  # noqa: F401
from .products import ProductFields, ProductPayload  # noqa: F401

S = TypeVar("S", bound=BaseModel)


def parse_payload(schema: Type[S], data: Any) -> S:
    """Validate a request body against ``schema``.

    Shape errors (wrong JSON types, unknown enum values) are reported as a
    ValidationError naming the first offending field.
    """
    try:
        return schema.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ()))
        field = str(first["loc"][0]) if first.get("loc") else None
        message = f"{loc}: {first['msg']}" if loc else first["msg"]
        raise ValidationError(message, field=field) from e


__all__ = [
    "parse_payload",
    "CategoryFields",
    "CategoryPayload",
    "EnquiryCreate",
    "EnquiryUpdate",
    "ProductFields",
    "ProductPayload",
]
