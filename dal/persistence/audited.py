"""Persistent Write Base — audited insert, update and delete on top of the read side.

Invariants:
    - insert() assigns record.id only after the statement succeeded and committed
    - update() and delete() are keyed by record.id and return the record as given
    - Each successful mutation produces exactly one AuditLogger.record() call,
      made after the primary connection scope closed
    - A failed mutation raises PersistenceError and is never audited

Design Decisions:
    - Statements are SQLAlchemy Core constructs on the table, so values are bound
      parameters on the way in and the same construct renders the audit text
    - Subclasses supply insert_values()/update_values() only; update defaults to
      the insert column set
"""

import logging
from typing import Any, TypeVar

from sqlalchemy import delete, insert, update

from dal.core.column_mapping import MappingRegistry
from dal.core.domain_types import ActorId, AuditAction
from dal.core.repository_protocols import ConnectionProvider
from dal.infrastructure.database import translate_errors
from dal.persistence.audit import AuditLogger
from dal.persistence.base import Persistent
from dal.schemas.base import Record

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class AuditedPersistent(Persistent[R]):
    """Full CRUD contract with a best-effort audit trail."""

    def __init__(
        self,
        provider: ConnectionProvider,
        registry: MappingRegistry,
        audit: AuditLogger | None = None,
    ):
        super().__init__(provider, registry)
        self._audit = audit or AuditLogger.for_provider(provider, registry)

    def insert_values(self, record: R) -> dict[str, Any]:
        """Column values written by insert()."""
        raise NotImplementedError

    def update_values(self, record: R) -> dict[str, Any]:
        """Column values written by update()."""
        return self.insert_values(record)

    @property
    def _pk(self):
        return self.definition.table.c[self.definition.id_column]

    def insert(self, record: R, actor_id: ActorId | int) -> R:
        d = self.definition
        with translate_errors(f"Error inserting {d.noun}", "insert", d.table_name):
            stmt = insert(d.table).values(**self.insert_values(record))
            with self._provider.connection() as conn:
                new_id = conn.execute(stmt).inserted_primary_key[0]
        record.id = new_id
        logger.debug(
            f"Inserted {d.noun} {new_id}",
            extra={"operation": "insert", "table": d.table_name,
                   "row_id": new_id, "actor_id": actor_id},
        )
        self._audit.record(AuditAction.INSERT, d.table_name, new_id, stmt, actor_id)
        return record

    def update(self, record: R, actor_id: ActorId | int) -> R:
        d = self.definition
        with translate_errors(f"Error updating {d.noun}", "update", d.table_name):
            stmt = (
                update(d.table)
                .where(self._pk == int(record.id))
                .values(**self.update_values(record))
            )
            with self._provider.connection() as conn:
                conn.execute(stmt)
        self._audit.record(AuditAction.UPDATE, d.table_name, record.id, stmt, actor_id)
        return record

    def delete(self, record: R, actor_id: ActorId | int) -> R:
        d = self.definition
        with translate_errors(f"Error deleting {d.noun}", "delete", d.table_name):
            stmt = delete(d.table).where(self._pk == int(record.id))
            with self._provider.connection() as conn:
                conn.execute(stmt)
        self._audit.record(AuditAction.DELETE, d.table_name, record.id, stmt, actor_id)
        return record
