"""City ORM — belongs to one country.

Invariants:
    - code is unique across countries (e.g. "BOG")
    - idcountry must reference an existing country
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class CityModel(Base):
    __tablename__ = "city"

    idcity: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    idcountry: Mapped[int] = mapped_column(
        Integer, ForeignKey("country.idcountry"), nullable=False,
    )
    code: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
