"""Registration ORM — a sold contract tying office, owner, beneficiaries and plan.

Invariants:
    - contract_number is unique
    - idbeneficiary1 / idbeneficiary2 are optional
"""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class RegistrationModel(Base):
    __tablename__ = "registration"

    idregistration: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    idoffice: Mapped[int] = mapped_column(
        Integer, ForeignKey("office.idoffice"), nullable=False,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    contract_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    idowner: Mapped[int] = mapped_column(
        Integer, ForeignKey("owner.idowner"), nullable=False,
    )
    idbeneficiary1: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("beneficiary.idbeneficiary"), nullable=True,
    )
    idbeneficiary2: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("beneficiary.idbeneficiary"), nullable=True,
    )
    idplan: Mapped[int] = mapped_column(
        Integer, ForeignKey("plan.idplan"), nullable=False,
    )
