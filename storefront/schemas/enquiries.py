from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.models.enquiry import EnquiryStatus


class EnquiryCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Product hex id
    product_id: str | None = None
    description: str | None = Field(default=None, max_length=2000)
    customer_name: str | None = Field(default=None, max_length=200)
    customer_phone: str | None = Field(default=None, max_length=50)
    customer_email: str | None = Field(default=None, max_length=255)

    @field_validator("product_id", "description", "customer_name", "customer_phone", "customer_email")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        return v or None


class EnquiryUpdate(BaseModel):
    """Partial update; only fields present in the body are applied."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    status: EnquiryStatus | None = None
    description: str | None = Field(default=None, max_length=2000)
    notes: str | None = Field(default=None, max_length=5000)
    customer_name: str | None = Field(default=None, max_length=200)
    customer_phone: str | None = Field(default=None, max_length=50)
    customer_email: str | None = Field(default=None, max_length=255)

    def to_patch(self) -> dict:
        patch = self.model_dump(exclude_unset=True)
        # Status is never cleared, only moved between states
        status = patch.pop("status", None)
        if status is not None:
            patch["status"] = EnquiryStatus(status).value
        return patch
