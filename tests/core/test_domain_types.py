"""Domain Types — verifies identity types, audit codes and list results.

Tests:
    - NewType wrappers are plain ints
    - AuditAction values are the stored single-letter codes
    - ListResult iterates its items and reports page length, not total
"""

from dal.core.domain_types import (
    UNSAVED_ID, ActorId, AuditAction, ListResult, RecordId,
)


def test_identity_types_wrap_int():
    assert RecordId(5) == 5
    assert ActorId(9) == 9
    assert UNSAVED_ID == 0


def test_audit_action_codes():
    assert AuditAction.INSERT.value == "I"
    assert AuditAction.UPDATE.value == "U"
    assert AuditAction.DELETE.value == "D"
    assert AuditAction("U") is AuditAction.UPDATE


def test_list_result_len_is_page_size():
    result = ListResult(["a", "b"], total=10)
    assert len(result) == 2
    assert list(result) == ["a", "b"]
    assert result.total == 10


def test_empty_list_result():
    result = ListResult()
    assert len(result) == 0
    assert result.total == 0
