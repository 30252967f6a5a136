from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storage_api.models.base import Base, AuditMixin


class User(AuditMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)

    # "manager" | "chef" | "admin"
    role: Mapped[str] = mapped_column(String(30), nullable=False)
