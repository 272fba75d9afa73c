"""Entity Graph Mapper — rebuilds a rooted object graph from one joined row.

Invariants:
    - The first component is the root; wire() receives parts in component order
    - field_list and split_points are both derived from the components' columns,
      so the SELECT list and the row split can never drift apart
    - A component whose columns are all NULL (absent outer-joined row) becomes None
    - verify() is the schema-conformance check: the statement's returned column
      names must equal field_list, in order

Design Decisions:
    - One joined query per read instead of one query per relation (no N+1),
      paid for with positional coupling that verify() and the per-entity
      conformance tests guard
    - The same record type may appear several times (owner and beneficiary
      identification types); each occurrence is its own Component with its own
      aliased columns, resolved through the MappingRegistry
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from dal.core.column_mapping import MappingRegistry
from dal.core.errors import SchemaMismatchError


@dataclass(frozen=True)
class Component:
    """One record type inside a joined row and the columns it owns."""
    role: str
    record_type: type
    columns: tuple[str, ...]

    def __post_init__(self):
        if not self.columns:
            raise ValueError(f"Component '{self.role}' declares no columns")


def _wire_root(root):
    return root


class JoinGraph:
    """Ordered components plus the wiring step that links them to the root."""

    def __init__(
        self,
        components: Sequence[Component],
        wire: Callable[..., Any] = _wire_root,
    ):
        if not components:
            raise ValueError("A join graph needs at least the root component")
        self.components = tuple(components)
        self._wire = wire

    @classmethod
    def single(cls, record_type: type, *columns: str) -> "JoinGraph":
        """Graph for a flat, single-table record."""
        return cls([Component("root", record_type, tuple(columns))])

    @property
    def root_type(self) -> type:
        return self.components[0].record_type

    @property
    def columns(self) -> list[str]:
        return [c for component in self.components for c in component.columns]

    @property
    def field_list(self) -> str:
        """The SELECT list, in exactly the order map_row slices it."""
        return ", ".join(self.columns)

    @property
    def split_points(self) -> tuple[int, ...]:
        """Column index at which each non-root component begins."""
        points = []
        position = 0
        for component in self.components[:-1]:
            position += len(component.columns)
            points.append(position)
        return tuple(points)

    def verify(self, columns: Sequence[str]) -> None:
        """Raise SchemaMismatchError unless columns match field_list."""
        expected = [c.lower() for c in self.columns]
        actual = [c.lower() for c in columns]
        if expected != actual:
            raise SchemaMismatchError(expected, actual)

    def map_row(self, row: Sequence[Any], registry: MappingRegistry):
        """Instantiate every component from its slice, wire them, return the root."""
        if len(row) != len(self.columns):
            raise SchemaMismatchError(self.columns, [f"<{len(row)} values>"])
        bounds = (0, *self.split_points, len(row))
        parts = []
        for component, start, end in zip(self.components, bounds, bounds[1:]):
            values = row[start:end]
            if all(v is None for v in values):
                parts.append(None)
                continue
            parts.append(
                registry.build(component.record_type, component.columns, values),
            )
        if parts[0] is None:
            return None
        return self._wire(*parts)

    def map_rows(self, rows, registry: MappingRegistry) -> list:
        return [self.map_row(row, registry) for row in rows]
