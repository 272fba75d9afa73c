"""Column Mapping — static alias tables translating result columns to record fields.

Invariants:
    - Lookup is keyed by (record type, column alias); aliases are case-insensitive
    - An unknown column resolves to None and is ignored, never an error
    - NULL values are skipped so the record's field defaults apply
    - A MappingRegistry is an explicit object; nothing here is process-global

Design Decisions:
    - Data, not reflection: every alias a query shape can produce is listed once
      (e.g. idcity, office_idcity -> City.id). Adding a view column means adding an
      alias, never touching the mapper
    - Records are built through their constructor, so pydantic coerces driver
      values (0/1 -> bool, 'YYYY-MM-DD' -> date) in one place
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any


class ColumnMapping:
    """Alias table for one record type."""

    def __init__(self, record_type: type, aliases: Mapping[str, str]):
        self.record_type = record_type
        self._aliases = {alias.lower(): name for alias, name in aliases.items()}

    def __contains__(self, column: str) -> bool:
        return column.lower() in self._aliases

    def resolve(self, column: str) -> str | None:
        """Field name for a column alias, or None when the column is unknown."""
        return self._aliases.get(column.lower())

    def build(self, columns: Sequence[str], values: Sequence[Any]):
        """Instantiate the record from a slice of a result row."""
        data = {}
        for column, value in zip(columns, values):
            name = self.resolve(column)
            if name is None or value is None:
                continue
            data[name] = value
        return self.record_type(**data)


class MappingRegistry:
    """Explicit (record type -> ColumnMapping) registry built once at startup."""

    def __init__(self, mappings: Iterable[ColumnMapping] = ()):
        self._mappings: dict[type, ColumnMapping] = {}
        for mapping in mappings:
            self.register(mapping)

    def register(self, mapping: ColumnMapping) -> None:
        self._mappings[mapping.record_type] = mapping

    def __contains__(self, record_type: type) -> bool:
        return record_type in self._mappings

    def mapping_for(self, record_type: type) -> ColumnMapping:
        try:
            return self._mappings[record_type]
        except KeyError:
            raise LookupError(
                f"No column mapping registered for {record_type.__name__}",
            ) from None

    def resolve(self, record_type: type, column: str) -> str | None:
        """Field name for (record_type, column), or None when unmapped."""
        mapping = self._mappings.get(record_type)
        return mapping.resolve(column) if mapping else None

    def build(
        self, record_type: type, columns: Sequence[str], values: Sequence[Any],
    ):
        return self.mapping_for(record_type).build(columns, values)
