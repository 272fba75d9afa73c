"""Audit Trail — best-effort log of every successful insert, update and delete.

Invariants:
    - AuditLogger.record() never raises and never logs: a failed audit write is
      discarded and the primary operation's result stands
    - The stored statement is the executed statement rendered with literal values
      for the connection's dialect, not placeholders
    - The timestamp comes from the database server default
    - PersistentAuditLog is insert-only on the write side

Design Decisions:
    - Audited on a best-effort basis, not transactionally: the entry is written
      after the primary connection scope has committed, so a crash in between
      leaves the mutation unaudited
    - The audit log uses the same ConnectionProvider as the component it audits:
      a fresh connection under the owning model, the shared one otherwise
"""

from contextlib import suppress

from sqlalchemy import insert
from sqlalchemy.engine import Dialect
from sqlalchemy.sql import Executable

from dal.core.column_mapping import MappingRegistry
from dal.core.domain_types import ActorId, AuditAction
from dal.core.graph_mapper import JoinGraph
from dal.core.repository_protocols import ConnectionProvider
from dal.infrastructure.database import translate_errors
from dal.models.log_db import AuditLogModel
from dal.persistence.base import EntityDefinition, Persistent
from dal.schemas.audit import AuditEntry


def render_statement(statement: Executable, dialect: Dialect) -> str:
    """SQL text of statement with bound values inlined as literals."""
    return str(statement.compile(
        dialect=dialect, compile_kwargs={"literal_binds": True},
    ))


class PersistentAuditLog(Persistent[AuditEntry]):
    """Audit entries: list, read and insert; never update or delete."""

    definition = EntityDefinition(
        noun="audit entry",
        plural="audit entries",
        table=AuditLogModel.__table__,
        source="log_db",
        id_column="idlog",
        graph=JoinGraph.single(
            AuditEntry,
            "idlog", "date", "action", "idtable", "table_name", "statement", "iduser",
        ),
    )

    def insert(self, entry: AuditEntry) -> AuditEntry:
        d = self.definition
        with translate_errors(f"Error inserting {d.noun}", "insert", d.table_name):
            return self.append(entry)

    def append(self, entry: AuditEntry) -> AuditEntry:
        """Insert without error translation (and so without logging)."""
        stmt = insert(self.definition.table).values(
            action=AuditAction(entry.action).value,
            idtable=entry.row_id,
            table_name=entry.table_name,
            statement=entry.statement,
            iduser=entry.actor_id,
        )
        with self._provider.connection() as conn:
            entry.id = conn.execute(stmt).inserted_primary_key[0]
        return entry


class AuditLogger:
    """Writes one AuditEntry per successful mutation, on a best-effort basis."""

    def __init__(self, log: PersistentAuditLog, dialect: Dialect):
        self._log = log
        self._dialect = dialect

    @classmethod
    def for_provider(
        cls, provider: ConnectionProvider, registry: MappingRegistry,
    ) -> "AuditLogger":
        return cls(PersistentAuditLog(provider, registry), provider.dialect)

    def record(
        self,
        action: AuditAction,
        table_name: str,
        row_id: int,
        statement: Executable,
        actor_id: ActorId | int,
    ) -> None:
        """Render and store the entry; any failure is swallowed."""
        # Best-effort: audit problems must not reach the caller, not even as a log line.
        with suppress(Exception):
            self._log.append(AuditEntry(
                action=action,
                table_name=table_name,
                row_id=int(row_id or 0),
                statement=render_statement(statement, self._dialect),
                actor_id=int(actor_id),
            ))
