"""Plan ORM — payment plan a registration is sold under."""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class PlanModel(Base):
    __tablename__ = "plan"

    idplan: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    initial_fee: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    installments_number: Mapped[int] = mapped_column(Integer, nullable=False)
    installment_value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
