"""Root conftest — shared database and seed fixtures.

Invariants:
    - Every test gets a fresh SQLite file database under tmp_path, with tables
      and read views created by create_schema()
    - Foreign keys are enforced (build_engine turns them on for SQLite)
    - Seed fixtures insert through the persistence components, so they are
      audited like any other mutation

Design Decisions:
    - File database instead of :memory:: the engine-owning provider opens a new
      connection per operation, and every connection must see the same data
    - Records are seeded bottom-up (country -> city -> office ...) so each
      fixture can be requested on its own
"""

import datetime as dt
import os
from decimal import Decimal

import pytest

# Ensure tests don't accidentally reach a real server
os.environ.setdefault("DATABASE_URL", "sqlite:///test.db")

from dal.bootstrap import build_data_access  # noqa: E402
from dal.db.schema import create_schema  # noqa: E402
from dal.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, build_engine,
)
from dal.schemas.admon import Registration  # noqa: E402
from dal.schemas.config import (  # noqa: E402
    City, Country, IdentificationType, Office, Plan,
)
from dal.schemas.crm import Beneficiary, Owner  # noqa: E402
from dal.schemas.mappings import build_mapping_registry  # noqa: E402

ACTOR = 7


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'dal.db'}")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def registry():
    return build_mapping_registry()


@pytest.fixture
def provider(engine):
    return DatabaseSessionManager(engine=engine)


@pytest.fixture
def data(provider, registry):
    return build_data_access(provider, registry)


@pytest.fixture
def country(data):
    return data.countries.insert(Country(code="COL", name="Colombia"), ACTOR)


@pytest.fixture
def city(data, country):
    return data.cities.insert(City(code="BOG", name="Bogota", country=country), ACTOR)


@pytest.fixture
def office(data, city):
    return data.offices.insert(
        Office(name="Centro", address="Calle 1", phone="555-0101", city=city), ACTOR,
    )


@pytest.fixture
def id_type(data):
    return data.identification_types.insert(IdentificationType(name="CC"), ACTOR)


@pytest.fixture
def owner(data, id_type):
    return data.owners.insert(
        Owner(
            name="Ana Perez", identification="1010", identification_type=id_type,
            email="ana@example.com",
        ),
        ACTOR,
    )


@pytest.fixture
def beneficiary(data, owner, id_type):
    return data.beneficiaries.insert(
        Beneficiary(
            name="Luis Perez", identification="2020", relationship="son",
            identification_type=id_type, owner=owner,
        ),
        ACTOR,
    )


@pytest.fixture
def plan(data):
    return data.plans.insert(
        Plan(
            value=Decimal("1200.00"), initial_fee=Decimal("200.00"),
            installments_number=10, installment_value=Decimal("100.00"),
            description="Standard",
        ),
        ACTOR,
    )


@pytest.fixture
def registration(data, office, owner, beneficiary, plan):
    return data.registrations.insert(
        Registration(
            date=dt.date(2026, 3, 14), contract_number="C-0001",
            office=office, owner=owner, beneficiary1=beneficiary, plan=plan,
        ),
        ACTOR,
    )
