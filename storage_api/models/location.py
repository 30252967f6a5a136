from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storage_api.models.base import Base, AuditMixin


class Location(AuditMixin, Base):
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    manager_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    # Location-scoped overstay defaults; null means "fall back to platform"
    overstay_grace_period_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overstay_penalty_rate: Mapped[float | None] = mapped_column(Numeric(5, 4, asdecimal=False), nullable=True)
    overstay_max_penalty_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overstay_policy_text: Mapped[str | None] = mapped_column(Text, nullable=True)
