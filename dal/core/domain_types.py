"""Domain Types — shared value types for records, list results and audit actions.

Invariants:
    - RecordId wraps int; 0 means "not yet persisted"
    - ActorId wraps int; identifies who performed a mutation (audit attribution only)
    - ListResult.total counts every row matching the filter, regardless of the page
    - AuditAction values are the single-letter codes stored in log_db.action

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: the stored code and the Python value are the same string
    - Not-found on read is None (see DESIGN.md), so no sentinel record type exists here
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, NewType, TypeVar


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)
ActorId = NewType("ActorId", int)

UNSAVED_ID = RecordId(0)


# ─── Enums ───────────────────────────────────────────────────────

class AuditAction(str, Enum):
    """Mutation kinds recorded in the audit trail."""
    INSERT = "I"
    UPDATE = "U"
    DELETE = "D"


# ─── Results ─────────────────────────────────────────────────────

T = TypeVar("T")


@dataclass
class ListResult(Generic[T]):
    """One page of records plus the total number of matching rows."""
    items: list[T] = field(default_factory=list)
    total: int = 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
