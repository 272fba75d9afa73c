"""Persistent Read Base — list and read for any record type described by an EntityDefinition.

Invariants:
    - list() runs the page query and the count query on the same connection
    - list().total ignores limit/offset; total >= len(items)
    - read() returns None when no row has the id (the one not-found convention)
    - Mapping happens inside the error translator, so a row the records cannot
      hold also surfaces as PersistenceError

Design Decisions:
    - Fragments are composed by QueryBuilder and sent through text() with colons
      escaped, so a literal ':' inside a filter is never taken for a bind
      parameter; read() binds the id normally
    - verify_schema() runs outside the translator: a conformance failure must
      stay a SchemaMismatchError
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy import Table, text
from sqlalchemy.sql.elements import TextClause

from dal.core.column_mapping import MappingRegistry
from dal.core.domain_types import ListResult, RecordId
from dal.core.graph_mapper import JoinGraph
from dal.core.query_builder import QueryBuilder
from dal.core.repository_protocols import ConnectionProvider
from dal.infrastructure.database import translate_errors

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class EntityDefinition:
    """Everything the generic operations need to know about one record type."""
    noun: str           # "city", used in error messages
    plural: str         # "cities"
    table: Table        # written by insert/update/delete
    source: str         # table or view read by list/read
    id_column: str      # primary key, present in both table and source
    graph: JoinGraph

    @property
    def table_name(self) -> str:
        return self.table.name


def raw_sql(sql: str) -> TextClause:
    """text() over composed SQL in which ':' is literal."""
    return text(sql.replace(":", r"\:"))


def fetch_page(
    provider: ConnectionProvider,
    builder: QueryBuilder,
    graph: JoinGraph,
    registry: MappingRegistry,
    filters: str = "",
    orders: str = "",
    limit: int = 0,
    offset: int = 0,
) -> ListResult:
    """Run the page and count statements and map the page; errors propagate."""
    with provider.connection() as conn:
        rows = conn.execute(raw_sql(
            builder.select_for_list(filters, orders, limit, offset),
        )).all()
        total = conn.execute(raw_sql(
            builder.count_for_list(filters, orders),
        )).scalar_one()
    return ListResult(graph.map_rows(rows, registry), int(total))


class Persistent(Generic[T]):
    """Read side of the persistence contract."""

    definition: EntityDefinition

    def __init__(self, provider: ConnectionProvider, registry: MappingRegistry):
        self._provider = provider
        self._registry = registry
        self._builder = QueryBuilder(
            self.definition.graph.field_list, self.definition.source,
        )

    @property
    def query_builder(self) -> QueryBuilder:
        return self._builder

    def list(
        self, filters: str = "", orders: str = "", limit: int = 0, offset: int = 0,
    ) -> ListResult[T]:
        """One page of records plus the total count of rows matching filters."""
        d = self.definition
        with translate_errors(f"Error listing {d.plural}", "list", d.table_name):
            return fetch_page(
                self._provider, self._builder, d.graph, self._registry,
                filters, orders, limit, offset,
            )

    def read(self, record_id: RecordId | int) -> T | None:
        """The record with this id, fully populated, or None."""
        d = self.definition
        with translate_errors(f"Error reading {d.noun}", "read", d.table_name):
            sql = (
                f"SELECT {self._builder.fields} FROM {self._builder.source} "
                f"WHERE {d.id_column} = :id"
            )
            with self._provider.connection() as conn:
                row = conn.execute(text(sql), {"id": int(record_id)}).first()
            if row is None:
                logger.debug(
                    f"{d.noun} {record_id} not found",
                    extra={"operation": "read", "table": d.table_name},
                )
                return None
            return d.graph.map_row(row, self._registry)

    def verify_schema(self) -> None:
        """Check that the statement's columns line up with the join graph."""
        with self._provider.connection() as conn:
            result = conn.execute(
                raw_sql(self._builder.select_for_list(limit=1)),
            )
            columns = list(result.keys())
        self.definition.graph.verify(columns)
