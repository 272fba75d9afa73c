"""Office Account Executives — audited links between offices and executives.

Tests:
    - Account executive CRUD wires its identification type
    - Assigned and unassigned listings partition the executives of one office
    - The caller's filter narrows either listing, never widens it
    - link and unlink each append one audit entry on executive_office
    - Linking the same pair twice is a conflict and is not audited
"""

import pytest

from dal.core.domain_types import AuditAction
from dal.core.errors import ErrorCategory, PersistenceError
from dal.schemas.admon import AccountExecutive
from dal.schemas.config import Office

ACTOR = 7


@pytest.fixture
def executives(data, id_type):
    return [
        data.account_executives.insert(
            AccountExecutive(name=name, identification=ident, identification_type=id_type),
            ACTOR,
        )
        for name, ident in (("Marta Ruiz", "E-1"), ("Pablo Gil", "E-2"), ("Rosa Vega", "E-3"))
    ]


def _link_entries(data):
    return data.audit_log.list("table_name = 'executive_office'", "idlog").items


def test_read_account_executive(data, executives, id_type):
    found = data.account_executives.read(executives[0].id)
    assert found.name == "Marta Ruiz"
    assert found.identification_type.id == id_type.id
    assert data.account_executives.read(999) is None


def test_update_account_executive(data, executives):
    executive = executives[1]
    executive.name = "Pablo Gil Mora"
    data.account_executives.update(executive, ACTOR)
    assert data.account_executives.read(executive.id).name == "Pablo Gil Mora"


def test_new_office_has_no_executives(data, office, executives):
    assert data.offices.list_account_executives(office).total == 0
    assert data.offices.list_not_account_executives(office).total == 3


def test_assigned_and_unassigned_partition(data, office, executives):
    data.offices.insert_account_executive(executives[0], office, ACTOR)
    data.offices.insert_account_executive(executives[2], office, ACTOR)
    assigned = data.offices.list_account_executives(office, "", "name")
    unassigned = data.offices.list_not_account_executives(office)
    assert [e.name for e in assigned] == ["Marta Ruiz", "Rosa Vega"]
    assert assigned.items[0].identification_type.name == "CC"
    assert [e.id for e in unassigned] == [executives[1].id]


def test_assignment_is_per_office(data, office, city, executives):
    other = data.offices.insert(Office(name="Norte", city=city), ACTOR)
    data.offices.insert_account_executive(executives[0], other, ACTOR)
    assert data.offices.list_account_executives(office).total == 0
    assert data.offices.list_not_account_executives(office).total == 3
    assert data.offices.list_account_executives(other).total == 1


def test_filter_narrows_listing(data, office, executives):
    data.offices.insert_account_executive(executives[0], office, ACTOR)
    assert data.offices.list_account_executives(office, "1 = 1 OR 1 = 1").total == 1
    unassigned = data.offices.list_not_account_executives(office, "name = 'Rosa Vega'")
    assert [e.id for e in unassigned] == [executives[2].id]


def test_unassigned_listing_pages_with_total(data, office, executives):
    page = data.offices.list_not_account_executives(office, "", "name", 1, 1)
    assert [e.name for e in page] == ["Pablo Gil"]
    assert page.total == 3


def test_link_and_unlink_are_audited(data, office, executives):
    executive = executives[0]
    data.offices.insert_account_executive(executive, office, 42)
    data.offices.delete_account_executive(executive, office, 42)
    entries = _link_entries(data)
    assert [e.action for e in entries] == [AuditAction.INSERT, AuditAction.DELETE]
    assert {e.actor_id for e in entries} == {42}
    assert f"VALUES ({office.id}, {executive.id})" in entries[0].statement
    assert "DELETE FROM executive_office" in entries[1].statement
    assert data.offices.list_account_executives(office).total == 0


def test_duplicate_link_is_a_conflict(data, office, executives):
    data.offices.insert_account_executive(executives[0], office, ACTOR)
    with pytest.raises(PersistenceError) as exc_info:
        data.offices.insert_account_executive(executives[0], office, ACTOR)
    assert exc_info.value.category == ErrorCategory.CONFLICT
    assert len(_link_entries(data)) == 1
    assert data.offices.list_account_executives(office).total == 1


def test_deleting_linked_executive_is_a_conflict(data, office, executives):
    data.offices.insert_account_executive(executives[0], office, ACTOR)
    with pytest.raises(PersistenceError) as exc_info:
        data.account_executives.delete(executives[0], ACTOR)
    assert exc_info.value.category == ErrorCategory.CONFLICT
