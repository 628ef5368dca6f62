from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.extensions import db
from storefront.models import generate_hex_id


class EnquiryStatus(str, Enum):
    PENDING = "pending"
    CONTACTED = "contacted"
    SALE_DONE = "sale_done"
    SALE_FAILED = "sale_failed"
    CANCELLED = "cancelled"


class Enquiry(db.Model):
    __tablename__ = "enquiries"

    id: Mapped[int] = mapped_column(primary_key=True)
    hex_id: Mapped[str] = mapped_column(db.String(32), unique=True, nullable=False, index=True, default=generate_hex_id)
    product_id: Mapped[int] = mapped_column(db.ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    status: Mapped[str] = mapped_column(db.String(20), nullable=False, default=EnquiryStatus.PENDING.value)
    description: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    customer_name: Mapped[str | None] = mapped_column(db.String(200), nullable=True)
    customer_phone: Mapped[str | None] = mapped_column(db.String(50), nullable=True)
    customer_email: Mapped[str | None] = mapped_column(db.String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(db.DateTime(timezone=True), onupdate=func.now())

    product: Mapped["Product"] = relationship(back_populates="enquiries")
