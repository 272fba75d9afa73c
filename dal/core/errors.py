"""Error Hierarchy — typed, categorized exceptions for all data access failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Persistence operations raise PersistenceError and nothing else
    - PersistenceError always carries the underlying cause (also chained as __cause__)
    - to_dict() produces the structured shape used by the JSON log formatter

Design Decisions:
    - Single hierarchy with DalError base: callers catch one type (ADR: uniform error shape)
    - Category derived from the cause, not from separate subclasses: callers that need
      to tell a duplicate key from a lost connection inspect .category, the
      exception type stays the same
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFLICT = "conflict"            # unique / foreign-key violation
    CONNECTIVITY = "connectivity"    # lost connection, timeout, unreachable server
    QUERY = "query"                  # malformed statement, unknown column in a fragment
    DATABASE = "database"            # any other store-reported failure
    SCHEMA = "schema"                # join graph out of step with the statement
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    table: str | None = None
    row_id: int | None = None
    debug_info: dict[str, Any] | None = None


class DalError(Exception):
    """Base exception for all data access errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a flat, JSON-serializable description."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "operation": self.context.operation,
            "table": self.context.table,
            "row_id": self.context.row_id,
        }


class PersistenceError(DalError):
    """A list, read, insert, update or delete could not be completed."""
    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        category: ErrorCategory = ErrorCategory.DATABASE,
        context: ErrorContext | None = None,
    ):
        severity = (
            ErrorSeverity.CRITICAL
            if category in (ErrorCategory.CONNECTIVITY, ErrorCategory.INTERNAL)
            else ErrorSeverity.ERROR
        )
        super().__init__(
            message, "PERSISTENCE_ERROR", category, severity, context,
        )
        self.cause = cause


class SchemaMismatchError(DalError):
    """A join graph does not match the columns its statement returns."""
    def __init__(
        self, expected: list[str], actual: list[str],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Join graph expects columns {expected} but statement returned {actual}",
            "SCHEMA_MISMATCH", ErrorCategory.SCHEMA,
            ErrorSeverity.CRITICAL, context,
        )
        self.expected = expected
        self.actual = actual
