"""AccountExecutive ORM — a salesperson who can be assigned to offices.

Invariants:
    - identification is unique
    - Office assignments live in executive_office, never on this row
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class AccountExecutiveModel(Base):
    __tablename__ = "account_executive"

    idaccountexecutive: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    ididentificationtype: Mapped[int] = mapped_column(
        Integer, ForeignKey("identification_type.ididentificationtype"),
        nullable=False,
    )
    identification: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
