from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Generated slugs come from names of at most 200 characters; the column
# leaves room past that for the "-N" suffix
PRODUCT_SLUG_MAX_LENGTH = 200


def _parse_number(v: Any) -> Any:
    # Numeric strings from forms become floats; anything else is left for the
    # business rules to reject
    if isinstance(v, str):
        text = v.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return v
    return v


class ProductFields(BaseModel):
    """The fields covered by ``validate_product_input``.

    Values are only normalised here, never rejected, so the ordered business
    rules decide which error a client sees.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    description: Any = None
    price: Any = None
    offer_price: Any = None
    images: Any = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Any:
        return _parse_number(v)

    @field_validator("offer_price", mode="before")
    @classmethod
    def parse_offer_price(cls, v: Any) -> Any:
        # Forms send "" or 0 for "no offer"; bools are kept so the rules reject them
        if v is None or (not isinstance(v, bool) and v in ("", 0)):
            return None
        return _parse_number(v)

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "offer_price": self.offer_price,
            "images": self.images,
        }


class ProductPayload(ProductFields):
    """Body of product create/update requests.

    Parsed after the business rules have passed, for the remaining fields.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    video_url: str | None = Field(default=None, max_length=500)
    slug: str | None = Field(default=None, max_length=PRODUCT_SLUG_MAX_LENGTH)
    # Category hex id
    category_id: str | None = None
    # On update, derive a new slug from the name when no slug is given
    regenerate_slug: bool = False

    @field_validator("video_url", "slug", "category_id")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        return v or None
