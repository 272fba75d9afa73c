"""Error Hierarchy — verifies codes, categories, severities and serialization.

Tests:
    - PersistenceError keeps its cause and derives severity from category
    - SchemaMismatchError carries expected/actual column lists
    - to_dict() is flat and JSON-friendly
"""

from dal.core.errors import (
    DalError, ErrorCategory, ErrorContext, ErrorSeverity,
    PersistenceError, SchemaMismatchError,
)


def test_persistence_error_keeps_cause():
    cause = RuntimeError("boom")
    error = PersistenceError("Error reading city", cause, ErrorCategory.QUERY)
    assert error.cause is cause
    assert error.message == "Error reading city"
    assert error.code == "PERSISTENCE_ERROR"
    assert isinstance(error, DalError)


def test_connectivity_errors_are_critical():
    error = PersistenceError("x", category=ErrorCategory.CONNECTIVITY)
    assert error.severity == ErrorSeverity.CRITICAL


def test_conflicts_are_plain_errors():
    error = PersistenceError("x", category=ErrorCategory.CONFLICT)
    assert error.severity == ErrorSeverity.ERROR


def test_schema_mismatch_lists_columns():
    error = SchemaMismatchError(["a", "b"], ["b", "a"])
    assert error.expected == ["a", "b"]
    assert error.actual == ["b", "a"]
    assert error.category == ErrorCategory.SCHEMA


def test_to_dict_is_flat():
    error = PersistenceError(
        "Error deleting office", category=ErrorCategory.CONFLICT,
        context=ErrorContext(operation="delete", table="office", row_id=3),
    )
    data = error.to_dict()
    assert data["code"] == "PERSISTENCE_ERROR"
    assert data["category"] == "conflict"
    assert data["severity"] == "error"
    assert data["operation"] == "delete"
    assert data["table"] == "office"
    assert data["row_id"] == 3
    assert isinstance(data["timestamp"], str)
