"""Configuration Persistence — countries, cities, offices, identification types, plans.

Tests:
    - insert assigns an id; read returns the fully wired record
    - read of a missing id returns None
    - list returns one page plus the total matching count
    - Duplicate keys and dangling references raise PersistenceError(CONFLICT)
    - City and office updates never move them to another parent
"""

from decimal import Decimal

import pytest

from dal.core.errors import ErrorCategory, ErrorSeverity, PersistenceError
from dal.schemas.config import City, Country, IdentificationType, Office, Plan

ACTOR = 7


# ─── Country ─────────────────────────────────────────────────────

def test_insert_assigns_id(data):
    country = data.countries.insert(Country(code="PER", name="Peru"), ACTOR)
    assert country.id > 0
    assert country.is_persisted


def test_read_country(data, country):
    found = data.countries.read(country.id)
    assert found == Country(id=country.id, code="COL", name="Colombia")


def test_read_missing_returns_none(data):
    assert data.countries.read(999) is None


def test_update_country(data, country):
    country.name = "Republica de Colombia"
    data.countries.update(country, ACTOR)
    assert data.countries.read(country.id).name == "Republica de Colombia"


def test_delete_country(data):
    country = data.countries.insert(Country(code="ECU", name="Ecuador"), ACTOR)
    data.countries.delete(country, ACTOR)
    assert data.countries.read(country.id) is None


def test_duplicate_code_is_a_conflict(data, country):
    with pytest.raises(PersistenceError) as exc_info:
        data.countries.insert(Country(code="COL", name="Again"), ACTOR)
    assert exc_info.value.category == ErrorCategory.CONFLICT
    assert exc_info.value.cause is not None
    assert exc_info.value.__cause__ is exc_info.value.cause
    assert data.countries.list("code = 'COL'").total == 1
    assert data.countries.read(country.id).name == "Colombia"


def test_failed_insert_leaves_id_unassigned(data, country):
    duplicate = Country(code="COL", name="Again")
    with pytest.raises(PersistenceError):
        data.countries.insert(duplicate, ACTOR)
    assert duplicate.id == 0


def test_list_pages_with_total(data):
    for code, name in (("ARG", "Argentina"), ("BRA", "Brasil"), ("CHL", "Chile")):
        data.countries.insert(Country(code=code, name=name), ACTOR)
    page = data.countries.list("", "", 1, 0)
    assert len(page) == 1
    assert page.total == 3


def test_list_filter_and_order(data):
    for code, name in (("ARG", "Argentina"), ("BRA", "Brasil"), ("CHL", "Chile")):
        data.countries.insert(Country(code=code, name=name), ACTOR)
    result = data.countries.list("code <> 'BRA'", "name DESC")
    assert [c.code for c in result] == ["CHL", "ARG"]
    assert result.total == 2


def test_list_offset_skips_rows(data):
    for code, name in (("ARG", "Argentina"), ("BRA", "Brasil"), ("CHL", "Chile")):
        data.countries.insert(Country(code=code, name=name), ACTOR)
    page = data.countries.list("", "code", 2, 2)
    assert [c.code for c in page] == ["CHL"]
    assert page.total == 3


def test_bad_filter_raises_persistence_error(data, country):
    with pytest.raises(PersistenceError) as exc_info:
        data.countries.list("no_such_column = 1")
    assert exc_info.value.message == "Error listing countries"
    assert exc_info.value.category == ErrorCategory.QUERY
    assert data.countries.list().total == 1


def test_bad_order_is_a_query_error(data, country):
    before = data.countries.list()
    with pytest.raises(PersistenceError) as exc_info:
        data.countries.list("", "no_such_column")
    assert exc_info.value.category == ErrorCategory.QUERY
    assert exc_info.value.severity == ErrorSeverity.ERROR
    after = data.countries.list()
    assert after.total == before.total
    assert after.items == before.items


def test_delete_referenced_country_is_a_conflict(data, city, country):
    with pytest.raises(PersistenceError) as exc_info:
        data.countries.delete(country, ACTOR)
    assert exc_info.value.category == ErrorCategory.CONFLICT


# ─── City ────────────────────────────────────────────────────────

def test_read_city_wires_country(data, city, country):
    found = data.cities.read(city.id)
    assert found.code == "BOG"
    assert found.country.id == country.id
    assert found.country.name == "Colombia"


def test_city_with_missing_country_is_a_conflict(data):
    orphan = City(code="LIM", name="Lima", country=Country(id=404))
    with pytest.raises(PersistenceError) as exc_info:
        data.cities.insert(orphan, ACTOR)
    assert exc_info.value.category == ErrorCategory.CONFLICT


def test_city_update_keeps_country(data, city, country):
    other = data.countries.insert(Country(code="PER", name="Peru"), ACTOR)
    city.name = "Santa Fe de Bogota"
    city.country = other
    data.cities.update(city, ACTOR)
    found = data.cities.read(city.id)
    assert found.name == "Santa Fe de Bogota"
    assert found.country.id == country.id


def test_list_cities_by_country_column(data, city):
    result = data.cities.list("country_code = 'COL'")
    assert result.total == 1
    assert result.items[0].country.code == "COL"


# ─── Office ──────────────────────────────────────────────────────

def test_read_office_wires_city_and_country(data, office):
    found = data.offices.read(office.id)
    assert found.name == "Centro"
    assert found.active is True
    assert found.city.name == "Bogota"
    assert found.city.code == "BOG"
    assert found.city.country.code == "COL"


def test_office_update_keeps_city(data, office, city, country):
    other = data.cities.insert(City(code="MDE", name="Medellin", country=country), ACTOR)
    office.active = False
    office.city = other
    data.offices.update(office, ACTOR)
    found = data.offices.read(office.id)
    assert found.active is False
    assert found.city.id == city.id


# ─── Identification type / plan ──────────────────────────────────

def test_identification_type_roundtrip(data, id_type):
    assert data.identification_types.read(id_type.id) == IdentificationType(
        id=id_type.id, name="CC",
    )


def test_plan_money_fields_are_decimal(data, plan):
    found = data.plans.read(plan.id)
    assert found.value == Decimal("1200.00")
    assert found.installments_number == 10
    assert isinstance(found.installment_value, Decimal)
    assert found.active is True


def test_plan_update(data, plan):
    plan.active = False
    plan.description = "Retired"
    data.plans.update(plan, ACTOR)
    found = data.plans.read(plan.id)
    assert found.active is False
    assert found.description == "Retired"
