"""Query Builder — composes list and count statements from trusted SQL fragments.

Invariants:
    - fields and source are sanitized once, at construction
    - filters and orders are sanitized on every call
    - Empty fragments omit their clause entirely (never an empty WHERE / ORDER BY)
    - LIMIT is emitted only when limit != 0; limit == 0 means "every matching row"
    - count_for_list never paginates

Design Decisions:
    - Plain string composition, no bind parameters: fragments are schema-literate
      text from trusted callers. sanitize() only stops trivial statement chaining
      and is NOT an injection defence
    - LIMIT <n> OFFSET <m> instead of MySQL's LIMIT <m>, <n>: same window, and
      accepted by MySQL, SQLite and PostgreSQL alike
    - Count keeps the ORDER BY so a bad order fragment fails both statements alike
"""


def sanitize(fragment: str | None) -> str:
    """Collapse doubled quotes and strip statement terminators."""
    if not fragment:
        return ""
    return fragment.replace("''", "'").replace(";", "")


def and_filters(*fragments: str | None) -> str:
    """Join the non-empty filter fragments with AND.

    With more than one fragment each is parenthesized, so an OR inside a
    caller's fragment cannot escape the scope set by another.
    """
    parts = [f for f in fragments if f]
    if len(parts) <= 1:
        return parts[0] if parts else ""
    return " AND ".join(f"({p})" for p in parts)


class QueryBuilder:
    """Builds SELECT statements over a fixed field list and source clause."""

    def __init__(self, fields: str, source: str):
        self._fields = sanitize(fields)
        self._source = sanitize(source)

    @property
    def fields(self) -> str:
        return self._fields

    @property
    def source(self) -> str:
        return self._source

    def select_for_list(
        self, filters: str = "", orders: str = "", limit: int = 0, offset: int = 0,
    ) -> str:
        """SELECT for one page of rows."""
        sql = f"SELECT {self._fields} FROM {self._source}"
        sql += self._where_order(filters, orders)
        if limit != 0:
            sql += f" LIMIT {int(limit)} OFFSET {int(offset)}"
        return sql

    def count_for_list(self, filters: str = "", orders: str = "") -> str:
        """SELECT COUNT over every row the filter matches."""
        sql = f"SELECT COUNT(1) AS total FROM {self._source}"
        return sql + self._where_order(filters, orders)

    @staticmethod
    def _where_order(filters: str, orders: str) -> str:
        clause = ""
        filters = sanitize(filters)
        orders = sanitize(orders)
        if filters:
            clause += f" WHERE {filters}"
        if orders:
            clause += f" ORDER BY {orders}"
        return clause
