"""Audit Records — what the audit trail stores for every mutation."""

from datetime import datetime

from dal.core.domain_types import AuditAction
from dal.schemas.base import Record


class AuditEntry(Record):
    """One audited insert, update or delete."""
    date: datetime | None = None
    action: AuditAction = AuditAction.INSERT
    row_id: int = 0
    table_name: str = ""
    statement: str = ""
    actor_id: int = 0
