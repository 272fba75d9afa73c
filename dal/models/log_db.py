"""Audit Log ORM — one row per audited insert, update or delete.

Invariants:
    - date is assigned by the server at insert time
    - action is one of I, U, D (AuditAction)
    - Rows are never updated or deleted by the data access layer

Design Decisions:
    - No foreign keys: an entry must survive deletion of the row it describes
    - statement holds the executed SQL with literal values, for humans, not replay
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from dal.db.base import Base


class AuditLogModel(Base):
    __tablename__ = "log_db"

    idlog: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(),
    )
    action: Mapped[str] = mapped_column(String(1), nullable=False)
    idtable: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    table_name: Mapped[str] = mapped_column(String(64), nullable=False)
    statement: Mapped[str] = mapped_column(Text, nullable=False)
    iduser: Mapped[int] = mapped_column(Integer, nullable=False)
