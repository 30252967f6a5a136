from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storage_api.models.base import Base, AuditMixin


class PlatformSetting(AuditMixin, Base):
    __tablename__ = "platform_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
