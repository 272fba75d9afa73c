"""Boundary Protocols — contracts between persistence components and their collaborators.

Invariants:
    - Persistence components never open connections themselves; they ask a
      ConnectionProvider for a scoped connection per operation
    - Read side and write side are separate contracts: the audit log implements
      the read side plus insert only

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous: every operation blocks until the store answers
"""

from contextlib import AbstractContextManager
from typing import Protocol, TypeVar

from sqlalchemy.engine import Connection, Dialect

from dal.core.domain_types import ActorId, ListResult, RecordId

T = TypeVar("T")


class ConnectionProvider(Protocol):
    """Hands out a connection scoped to one operation."""
    dialect: Dialect

    def connection(self) -> AbstractContextManager[Connection]: ...


class PersistentRead(Protocol[T]):
    """Contract for listing and reading one record type."""
    def list(
        self, filters: str = "", orders: str = "", limit: int = 0, offset: int = 0,
    ) -> ListResult[T]: ...
    def read(self, record_id: RecordId | int) -> T | None: ...


class PersistentWrite(Protocol[T]):
    """Contract for audited mutations of one record type."""
    def insert(self, record: T, actor_id: ActorId | int) -> T: ...
    def update(self, record: T, actor_id: ActorId | int) -> T: ...
    def delete(self, record: T, actor_id: ActorId | int) -> T: ...
