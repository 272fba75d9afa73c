"""Country ORM — top of the geographic lookup chain.

Invariants:
    - code is unique (e.g. "COL")
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class CountryModel(Base):
    __tablename__ = "country"

    idcountry: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
