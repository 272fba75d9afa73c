"""Connection Models — engine-owning vs borrowed connections, and error translation.

Tests:
    - DatabaseSessionManager closes its connection after every operation,
      commits on success and rolls back on failure
    - SharedConnection never closes the caller's connection and reopens a
      closed one on demand
    - A transaction begun by the caller is left for the caller to end
    - translate_errors logs at ERROR and chains the cause
    - Driver error codes separate a malformed statement from a lost connection
"""

import logging

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from dal.bootstrap import build_data_access
from dal.core.errors import ErrorCategory, PersistenceError
from dal.infrastructure.database import (
    DatabaseSessionManager, SharedConnection, categorize, translate_errors,
)
from dal.schemas.config import Country

ACTOR = 7


def test_owned_connection_is_closed_after_use(provider):
    with provider.connection() as conn:
        conn.execute(text("SELECT 1"))
    assert conn.closed


def test_owned_connection_rolls_back_on_failure(provider, data):
    with pytest.raises(RuntimeError):
        with provider.connection() as conn:
            conn.execute(text("INSERT INTO country (code, name) VALUES ('X', 'Gone')"))
            raise RuntimeError("abort")
    assert conn.closed
    assert data.countries.list().total == 0


def test_owned_model_requires_url_or_engine():
    with pytest.raises(ValueError):
        DatabaseSessionManager()


def test_health_check(provider):
    assert provider.health_check() is True


def test_shared_connection_stays_open(engine, registry):
    conn = engine.connect()
    try:
        data = build_data_access(SharedConnection(conn), registry)
        country = data.countries.insert(Country(code="PAN", name="Panama"), ACTOR)
        assert data.countries.read(country.id).code == "PAN"
        assert not conn.closed
    finally:
        conn.close()


def test_shared_connection_reopens_when_closed(engine, registry):
    shared = SharedConnection(engine)
    assert shared.closed
    data = build_data_access(shared, registry)
    data.countries.insert(Country(code="PAN", name="Panama"), ACTOR)
    assert not shared.closed
    shared.close()
    assert shared.closed
    assert data.countries.list().total == 1
    assert not shared.closed
    shared.close()


def test_caller_transaction_is_left_to_the_caller(engine, registry):
    conn = engine.connect()
    try:
        data = build_data_access(SharedConnection(conn), registry)
        trans = conn.begin()
        data.countries.insert(Country(code="PAN", name="Panama"), ACTOR)
        assert conn.in_transaction()
        trans.rollback()
        assert data.countries.list().total == 0
        assert data.audit_log.list().total == 0
    finally:
        conn.close()


def test_translate_errors_logs_and_chains(caplog):
    cause = ValueError("bad value")
    with caplog.at_level(logging.ERROR):
        with pytest.raises(PersistenceError) as exc_info:
            with translate_errors("Error reading city", "read", "city", 3):
                raise cause
    error = exc_info.value
    assert error.__cause__ is cause
    assert error.category == ErrorCategory.INTERNAL
    assert error.context.row_id == 3
    record = caplog.records[-1]
    assert record.operation == "read"
    assert record.table == "city"


def test_translate_errors_passes_persistence_error_through():
    original = PersistenceError("inner")
    with pytest.raises(PersistenceError) as exc_info:
        with translate_errors("outer", "list"):
            raise original
    assert exc_info.value is original


def test_mysql_unknown_column_is_a_query_error():
    error = OperationalError(
        "SELECT x FROM country", {}, Exception(1054, "Unknown column 'x'"),
    )
    assert categorize(error) == ErrorCategory.QUERY


def test_mysql_lost_connection_is_connectivity():
    error = OperationalError(
        "SELECT 1", {}, Exception(2013, "Lost connection to MySQL server"),
    )
    assert categorize(error) == ErrorCategory.CONNECTIVITY


def test_categorize_unknown_exception_is_internal():
    assert categorize(KeyError("x")) == ErrorCategory.INTERNAL
