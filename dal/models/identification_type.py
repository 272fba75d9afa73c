"""IdentificationType ORM — lookup shared by owners and beneficiaries."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class IdentificationTypeModel(Base):
    __tablename__ = "identification_type"

    ididentificationtype: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
