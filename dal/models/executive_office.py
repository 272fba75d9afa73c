"""ExecutiveOffice ORM — link table assigning account executives to offices.

Invariants:
    - (idoffice, idaccountexecutive) is the primary key: a pair is linked once
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class ExecutiveOfficeModel(Base):
    __tablename__ = "executive_office"

    idoffice: Mapped[int] = mapped_column(
        Integer, ForeignKey("office.idoffice"), primary_key=True,
    )
    idaccountexecutive: Mapped[int] = mapped_column(
        Integer, ForeignKey("account_executive.idaccountexecutive"), primary_key=True,
    )
