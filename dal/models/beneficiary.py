"""Beneficiary ORM — a person an owner names on a registration."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class BeneficiaryModel(Base):
    __tablename__ = "beneficiary"

    idbeneficiary: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    idowner: Mapped[int] = mapped_column(
        Integer, ForeignKey("owner.idowner"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    ididentificationtype: Mapped[int] = mapped_column(
        Integer, ForeignKey("identification_type.ididentificationtype"),
        nullable=False,
    )
    identification: Mapped[str] = mapped_column(String(50), nullable=False)
    relationship: Mapped[str | None] = mapped_column(String(50), nullable=True)
