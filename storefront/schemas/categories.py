from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Names are capped at 100 characters; the column leaves room for "-N"
CATEGORY_SLUG_MAX_LENGTH = 100


class CategoryFields(BaseModel):
    """Fields covered by ``validate_category_input``; normalised, never rejected."""

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    description: Any = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v

    def to_record(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}


class CategoryPayload(CategoryFields):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    slug: str | None = Field(default=None, max_length=CATEGORY_SLUG_MAX_LENGTH)
    regenerate_slug: bool = False

    @field_validator("slug")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        return v or None
