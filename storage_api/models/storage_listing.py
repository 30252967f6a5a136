from sqlalchemy import JSON, Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storage_api.models.base import Base, AuditMixin


class StorageListing(AuditMixin, Base):
    __tablename__ = "storage_listings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kitchen_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("kitchens.id", ondelete="CASCADE"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # "dry" | "cold" | "freezer" (not enforced)
    storage_type: Mapped[str] = mapped_column(String(40), nullable=False)

    # Pricing, in cents
    pricing_model: Mapped[str] = mapped_column(String(40), nullable=False)
    base_price: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_cubic_foot: Mapped[int | None] = mapped_column(Integer, nullable=True)
    minimum_booking_duration: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    booking_duration_unit: Mapped[str] = mapped_column(String(20), nullable=False, default="monthly")
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="CAD")

    # Free-form; observed values include "draft", "pending", "approved", "active"
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="draft")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    features: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    overstay_grace_period_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overstay_penalty_rate: Mapped[float | None] = mapped_column(Numeric(5, 4, asdecimal=False), nullable=True)
    overstay_max_penalty_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overstay_policy_text: Mapped[str | None] = mapped_column(Text, nullable=True)
