"""Database Connections — connection ownership models and the error translator.

Invariants:
    - Every connection handed out is scoped to one operation (context manager)
    - DatabaseSessionManager closes its connection on every exit path
    - SharedConnection never closes the caller's connection; it only reopens it
      when it finds it closed
    - A provider commits only a transaction it began itself, and rolls it back
      on any exception
    - Every failure inside translate_errors() leaves as PersistenceError, with
      the original exception as .cause and __cause__

Design Decisions:
    - Two ownership models behind one ConnectionProvider protocol: persistence
      code is identical whether it owns the engine or borrows a connection
    - Synchronous engine: the layer is blocking by contract, no async plumbing
    - SQLite gets PRAGMA foreign_keys=ON on connect so FK violations behave
      like the production store
    - No locking around SharedConnection: callers sharing one serialize access
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, Dialect, Engine
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, ProgrammingError, SQLAlchemyError,
)

from dal.core.errors import (
    ErrorCategory, ErrorContext, PersistenceError,
)

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    database_url: str, pool_size: int = 5, max_overflow: int = 10, echo: bool = False,
) -> Engine:
    """Create a synchronous engine; pool options apply to server databases only."""
    if database_url.startswith("sqlite"):
        engine = create_engine(database_url, echo=echo)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(
        database_url,
        echo=echo,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


@contextmanager
def _scoped_transaction(connection: Connection) -> Iterator[Connection]:
    started = not connection.in_transaction()
    try:
        yield connection
        if started and connection.in_transaction():
            connection.commit()
    except Exception:
        if started and connection.in_transaction():
            connection.rollback()
        raise


class DatabaseSessionManager:
    """Owns the engine; opens a fresh connection per operation and always closes it."""

    def __init__(
        self,
        database_url: str | None = None,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
        engine: Engine | None = None,
    ):
        if engine is None:
            if database_url is None:
                raise ValueError("database_url or engine is required")
            engine = build_engine(database_url, pool_size, max_overflow, echo)
        self.engine = engine

    @property
    def dialect(self) -> Dialect:
        return self.engine.dialect

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Fresh connection, committed on success, closed unconditionally."""
        connection = self.engine.connect()
        try:
            with _scoped_transaction(connection):
                yield connection
        finally:
            connection.close()

    def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            with self.connection() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


class SharedConnection:
    """Borrows one connection from the surrounding call chain.

    The connection is (re)opened on demand but never closed here; whoever
    created the SharedConnection decides when to call close().
    """

    def __init__(self, bind: Engine | Connection):
        if isinstance(bind, Connection):
            self._engine = bind.engine
            self._connection: Connection | None = bind
        else:
            self._engine = bind
            self._connection = None

    @property
    def dialect(self) -> Dialect:
        return self._engine.dialect

    @property
    def closed(self) -> bool:
        return self._connection is None or self._connection.closed

    def ensure_open(self) -> Connection:
        """Return the shared connection, opening it first if needed."""
        if self.closed:
            self._connection = self._engine.connect()
        return self._connection

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        connection = self.ensure_open()
        with _scoped_transaction(connection):
            yield connection

    def close(self) -> None:
        if self._connection is not None and not self._connection.closed:
            self._connection.close()


# ─── Error translation ──────────────────────────────────────────

_CATEGORIES: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (IntegrityError, ErrorCategory.CONFLICT),
    (OperationalError, ErrorCategory.CONNECTIVITY),
    (ProgrammingError, ErrorCategory.QUERY),
    (DBAPIError, ErrorCategory.DATABASE),
    (SQLAlchemyError, ErrorCategory.DATABASE),
)


# MySQL: unknown column, syntax error, unknown table
_QUERY_ERROR_CODES = frozenset({1054, 1064, 1146})
# sqlite3 reports these as OperationalError, with no code
_QUERY_ERROR_MESSAGES = (
    "no such column", "no such table", "syntax error", "ambiguous column name",
)


def _is_query_error(error: DBAPIError) -> bool:
    """A malformed statement, judged by the driver error behind the wrapper."""
    orig = error.orig
    if orig is None:
        return False
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int) and args[0] in _QUERY_ERROR_CODES:
        return True
    description = str(orig).lower()
    return any(m in description for m in _QUERY_ERROR_MESSAGES)


def categorize(error: BaseException) -> ErrorCategory:
    """Category from the exception type, refined by the driver error code.

    Drivers report a bad column in a fragment as an operational error (sqlite3,
    PyMySQL error 1054), so QUERY is decided before CONNECTIVITY.
    """
    if (
        isinstance(error, DBAPIError)
        and not isinstance(error, IntegrityError)
        and _is_query_error(error)
    ):
        return ErrorCategory.QUERY
    for error_type, category in _CATEGORIES:
        if isinstance(error, error_type):
            return category
    return ErrorCategory.INTERNAL


@contextmanager
def translate_errors(
    message: str,
    operation: str,
    table: str | None = None,
    row_id: int | None = None,
) -> Iterator[None]:
    """Re-raise any failure in the block as PersistenceError(message)."""
    try:
        yield
    except PersistenceError:
        raise
    except Exception as e:
        category = categorize(e)
        logger.error(
            f"{message}: {e}",
            extra={
                "operation": operation, "table": table, "row_id": row_id,
                "error_code": "PERSISTENCE_ERROR",
            },
        )
        raise PersistenceError(
            message, e, category,
            ErrorContext(operation=operation, table=table, row_id=row_id),
        ) from e
