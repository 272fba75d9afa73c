"""Office ORM — a branch located in one city."""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class OfficeModel(Base):
    __tablename__ = "office"

    idoffice: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    idcity: Mapped[int] = mapped_column(
        Integer, ForeignKey("city.idcity"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
