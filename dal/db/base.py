"""SQLAlchemy Declarative Base — shared base class for all ORM table models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Models describe tables only; reads go through views and the query builder,
      writes through Core insert/update/delete on Model.__table__
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all data access ORM models."""
    pass
