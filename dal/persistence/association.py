"""Audited Associations — many-to-many links between an owner record and members.

Invariants:
    - list_linked() and list_unlinked() partition the member set for one owner;
      the caller's filter narrows each side and never widens it
    - link() and unlink() touch exactly one (owner, member) row of the link table
    - Each successful link/unlink produces one audit entry on the link table,
      with row id 0 (the link has no id of its own)
    - A failed link/unlink raises PersistenceError and is never audited

Design Decisions:
    - Configured by an AssociationDefinition, like Persistent by EntityDefinition:
      an association reads members through two views (linked and all members)
      that share one join graph
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy import Table, delete, insert

from dal.core.column_mapping import MappingRegistry
from dal.core.domain_types import ActorId, AuditAction, ListResult
from dal.core.graph_mapper import JoinGraph
from dal.core.query_builder import QueryBuilder, and_filters
from dal.core.repository_protocols import ConnectionProvider
from dal.infrastructure.database import translate_errors
from dal.persistence.audit import AuditLogger
from dal.persistence.base import fetch_page
from dal.schemas.base import Record

M = TypeVar("M", bound=Record)


@dataclass(frozen=True)
class AssociationDefinition:
    plural: str           # "account executives"
    owner_noun: str       # "office"
    table: Table          # link table written by link/unlink
    owner_column: str
    member_column: str
    linked_source: str    # members joined to the link table, carries owner_column
    member_source: str    # every member
    graph: JoinGraph

    @property
    def table_name(self) -> str:
        return self.table.name


class AuditedAssociation(Generic[M]):
    """List, link and unlink the members of one owner."""

    def __init__(
        self,
        definition: AssociationDefinition,
        provider: ConnectionProvider,
        registry: MappingRegistry,
        audit: AuditLogger,
    ):
        self.definition = definition
        self._provider = provider
        self._registry = registry
        self._audit = audit
        self._linked = QueryBuilder(definition.graph.field_list, definition.linked_source)
        self._members = QueryBuilder(definition.graph.field_list, definition.member_source)

    def list_linked(
        self, owner: Record, filters: str = "", orders: str = "",
        limit: int = 0, offset: int = 0,
    ) -> ListResult[M]:
        d = self.definition
        scope = f"{d.owner_column} = {int(owner.id)}"
        with translate_errors(
            f"Error listing {d.plural} of {d.owner_noun}", "list", d.table_name,
        ):
            return fetch_page(
                self._provider, self._linked, d.graph, self._registry,
                and_filters(scope, filters), orders, limit, offset,
            )

    def list_unlinked(
        self, owner: Record, filters: str = "", orders: str = "",
        limit: int = 0, offset: int = 0,
    ) -> ListResult[M]:
        d = self.definition
        scope = (
            f"{d.member_column} NOT IN (SELECT {d.member_column} FROM {d.table_name} "
            f"WHERE {d.owner_column} = {int(owner.id)})"
        )
        with translate_errors(
            f"Error listing {d.plural} not in {d.owner_noun}", "list", d.table_name,
        ):
            return fetch_page(
                self._provider, self._members, d.graph, self._registry,
                and_filters(scope, filters), orders, limit, offset,
            )

    def link(self, member: M, owner: Record, actor_id: ActorId | int) -> M:
        d = self.definition
        with translate_errors(f"Error linking {d.owner_noun} member", "insert", d.table_name):
            stmt = insert(d.table).values({
                d.owner_column: int(owner.id), d.member_column: int(member.id),
            })
            with self._provider.connection() as conn:
                conn.execute(stmt)
        self._audit.record(AuditAction.INSERT, d.table_name, 0, stmt, actor_id)
        return member

    def unlink(self, member: M, owner: Record, actor_id: ActorId | int) -> M:
        d = self.definition
        with translate_errors(f"Error unlinking {d.owner_noun} member", "delete", d.table_name):
            stmt = delete(d.table).where(
                d.table.c[d.owner_column] == int(owner.id),
                d.table.c[d.member_column] == int(member.id),
            )
            with self._provider.connection() as conn:
                conn.execute(stmt)
        self._audit.record(AuditAction.DELETE, d.table_name, 0, stmt, actor_id)
        return member
