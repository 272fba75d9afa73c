"""Schema Helpers — read views and whole-schema creation for migrations and tests.

Invariants:
    - Each entity view exposes exactly the columns its entity's join graph selects, with
      the aliases listed in the mapping tables (schemas/mappings.py)
    - Views are created after tables and dropped before them

Design Decisions:
    - Views hold the joins so every list/read is a single-source SELECT that a
      filter fragment can address by plain column name
    - Plain ANSI joins: the same DDL runs on MySQL, PostgreSQL and SQLite
"""

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from dal.db.base import Base
import dal.models  # noqa: F401  (populates Base.metadata)

VIEWS: dict[str, str] = {
    "v_city": """
        SELECT ci.idcity, ci.code, ci.name,
               co.idcountry, co.code AS country_code, co.name AS country_name
        FROM city ci
        JOIN country co ON co.idcountry = ci.idcountry
    """,
    "v_office": """
        SELECT o.idoffice, o.name, o.address, o.phone, o.active,
               ci.idcity, ci.name AS city, ci.code AS city_code,
               co.idcountry, co.code AS country_code, co.name AS country_name
        FROM office o
        JOIN city ci ON ci.idcity = o.idcity
        JOIN country co ON co.idcountry = ci.idcountry
    """,
    "v_owner": """
        SELECT ow.idowner, ow.name, ow.identification, ow.address_home,
               ow.address_office, ow.phone_home, ow.phone_office, ow.email,
               it.ididentificationtype, it.name AS identificationtype
        FROM owner ow
        JOIN identification_type it
          ON it.ididentificationtype = ow.ididentificationtype
    """,
    "v_beneficiary": """
        SELECT b.idbeneficiary, b.name, b.identification, b.relationship,
               ow.idowner, ow.name AS owner,
               ow.identification AS owner_identification,
               ow.email AS owner_email,
               ito.ididentificationtype AS owner_ididentificationtype,
               ito.name AS owner_identificationtype,
               itb.ididentificationtype, itb.name AS identificationtype
        FROM beneficiary b
        JOIN owner ow ON ow.idowner = b.idowner
        JOIN identification_type ito
          ON ito.ididentificationtype = ow.ididentificationtype
        JOIN identification_type itb
          ON itb.ididentificationtype = b.ididentificationtype
    """,
    "v_account_executive": """
        SELECT ae.idaccountexecutive, ae.name, ae.identification,
               it.ididentificationtype, it.name AS identificationtype
        FROM account_executive ae
        JOIN identification_type it
          ON it.ididentificationtype = ae.ididentificationtype
    """,
    "v_executive_office": """
        SELECT eo.idoffice, ae.idaccountexecutive, ae.name, ae.identification,
               it.ididentificationtype, it.name AS identificationtype
        FROM executive_office eo
        JOIN account_executive ae ON ae.idaccountexecutive = eo.idaccountexecutive
        JOIN identification_type it
          ON it.ididentificationtype = ae.ididentificationtype
    """,
    "v_registration": """
        SELECT r.idregistration, r.date, r.contract_number,
               o.idoffice, o.name AS office, o.address AS office_address,
               o.phone AS office_phone, o.active AS office_active,
               ci.idcity AS office_idcity, ci.code AS office_city_code,
               ci.name AS office_city_name,
               co.idcountry AS office_idcountry, co.code AS office_country_code,
               co.name AS office_country_name,
               ow.idowner, ow.name AS owner, ow.identification AS owner_identification,
               ow.address_home AS owner_address_home,
               ow.address_office AS owner_address_office,
               ow.phone_home AS owner_phone_home, ow.phone_office AS owner_phone_office,
               ow.email AS owner_email,
               ito.ididentificationtype AS owner_ididentificationtype,
               ito.name AS owner_identificationtype,
               b1.idbeneficiary AS idbeneficiary1, b1.name AS beneficiary1,
               b1.identification AS beneficiary1_identification,
               b1.relationship AS beneficiary1_relationship,
               itb1.ididentificationtype AS beneficiary1_ididentificationtype,
               itb1.name AS beneficiary1_identificationtype,
               b2.idbeneficiary AS idbeneficiary2, b2.name AS beneficiary2,
               b2.identification AS beneficiary2_identification,
               b2.relationship AS beneficiary2_relationship,
               itb2.ididentificationtype AS beneficiary2_ididentificationtype,
               itb2.name AS beneficiary2_identificationtype,
               p.idplan, p.value AS plan_value, p.initial_fee AS plan_initial_fee,
               p.installments_number AS plan_installments_number,
               p.installment_value AS plan_installment_value,
               p.active AS plan_active, p.description AS plan_description
        FROM registration r
        JOIN office o ON o.idoffice = r.idoffice
        JOIN city ci ON ci.idcity = o.idcity
        JOIN country co ON co.idcountry = ci.idcountry
        JOIN owner ow ON ow.idowner = r.idowner
        JOIN identification_type ito
          ON ito.ididentificationtype = ow.ididentificationtype
        LEFT JOIN beneficiary b1 ON b1.idbeneficiary = r.idbeneficiary1
        LEFT JOIN identification_type itb1
          ON itb1.ididentificationtype = b1.ididentificationtype
        LEFT JOIN beneficiary b2 ON b2.idbeneficiary = r.idbeneficiary2
        LEFT JOIN identification_type itb2
          ON itb2.ididentificationtype = b2.ididentificationtype
        JOIN plan p ON p.idplan = r.idplan
    """,
}


def create_views(connection: Connection) -> None:
    for name, select in VIEWS.items():
        connection.execute(text(f"CREATE VIEW {name} AS {select.strip()}"))


def drop_views(connection: Connection) -> None:
    for name in reversed(list(VIEWS)):
        connection.execute(text(f"DROP VIEW IF EXISTS {name}"))


def create_schema(engine: Engine) -> None:
    """Create every table and view on an empty database."""
    Base.metadata.create_all(engine)
    with engine.begin() as connection:
        create_views(connection)


def drop_schema(engine: Engine) -> None:
    with engine.begin() as connection:
        drop_views(connection)
    Base.metadata.drop_all(engine)
