"""Owner ORM — the contract holder of a registration.

Invariants:
    - identification is unique
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class OwnerModel(Base):
    __tablename__ = "owner"

    idowner: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    identification: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    ididentificationtype: Mapped[int] = mapped_column(
        Integer, ForeignKey("identification_type.ididentificationtype"),
        nullable=False,
    )
    address_home: Mapped[str | None] = mapped_column(String(200), nullable=True)
    address_office: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone_home: Mapped[str | None] = mapped_column(String(50), nullable=True)
    phone_office: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(200), nullable=True)
