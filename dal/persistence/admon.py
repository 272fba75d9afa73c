"""Administration Persistence — registrations and account executives.

Invariants:
    - One v_registration row yields: registration, office, office city, city
      country, owner, owner identification type, beneficiary 1 and its
      identification type, beneficiary 2 and its identification type, plan
    - Missing beneficiaries (outer join) come back as None
    - Writes store foreign keys only; nested records are never written through
      a registration
"""

from dal.core.graph_mapper import Component, JoinGraph
from dal.models.account_executive import AccountExecutiveModel
from dal.models.registration import RegistrationModel
from dal.persistence.audited import AuditedPersistent
from dal.persistence.base import EntityDefinition
from dal.schemas.admon import AccountExecutive, Registration
from dal.schemas.config import City, Country, IdentificationType, Office, Plan
from dal.schemas.crm import Beneficiary, Owner


def _beneficiary_components(slot: int) -> list[Component]:
    prefix = f"beneficiary{slot}"
    return [
        Component(
            prefix, Beneficiary,
            (f"idbeneficiary{slot}", prefix, f"{prefix}_identification",
             f"{prefix}_relationship"),
        ),
        Component(
            f"{prefix}_identification_type", IdentificationType,
            (f"{prefix}_ididentificationtype", f"{prefix}_identificationtype"),
        ),
    ]


REGISTRATION_GRAPH_COMPONENTS = [
    Component(
        "registration", Registration,
        ("idregistration", "date", "contract_number"),
    ),
    Component(
        "office", Office,
        ("idoffice", "office", "office_address", "office_phone", "office_active"),
    ),
    Component(
        "office_city", City,
        ("office_idcity", "office_city_code", "office_city_name"),
    ),
    Component(
        "office_country", Country,
        ("office_idcountry", "office_country_code", "office_country_name"),
    ),
    Component(
        "owner", Owner,
        ("idowner", "owner", "owner_identification", "owner_address_home",
         "owner_address_office", "owner_phone_home", "owner_phone_office",
         "owner_email"),
    ),
    Component(
        "owner_identification_type", IdentificationType,
        ("owner_ididentificationtype", "owner_identificationtype"),
    ),
    *_beneficiary_components(1),
    *_beneficiary_components(2),
    Component(
        "plan", Plan,
        ("idplan", "plan_value", "plan_initial_fee", "plan_installments_number",
         "plan_installment_value", "plan_active", "plan_description"),
    ),
]


def _wire_registration(
    registration: Registration,
    office: Office,
    city: City,
    country: Country,
    owner: Owner,
    owner_identification_type: IdentificationType,
    beneficiary1: Beneficiary | None,
    beneficiary1_identification_type: IdentificationType | None,
    beneficiary2: Beneficiary | None,
    beneficiary2_identification_type: IdentificationType | None,
    plan: Plan,
) -> Registration:
    city.country = country
    office.city = city
    registration.office = office
    owner.identification_type = owner_identification_type
    registration.owner = owner
    if beneficiary1 is not None:
        beneficiary1.identification_type = beneficiary1_identification_type
    registration.beneficiary1 = beneficiary1
    if beneficiary2 is not None:
        beneficiary2.identification_type = beneficiary2_identification_type
    registration.beneficiary2 = beneficiary2
    registration.plan = plan
    return registration


class PersistentRegistration(AuditedPersistent[Registration]):
    definition = EntityDefinition(
        noun="registration",
        plural="registrations",
        table=RegistrationModel.__table__,
        source="v_registration",
        id_column="idregistration",
        graph=JoinGraph(REGISTRATION_GRAPH_COMPONENTS, _wire_registration),
    )

    def insert_values(self, record: Registration) -> dict:
        return {
            "idoffice": record.office.id,
            "date": record.date,
            "contract_number": record.contract_number,
            "idowner": record.owner.id,
            "idbeneficiary1": record.beneficiary1.id if record.beneficiary1 else None,
            "idbeneficiary2": record.beneficiary2.id if record.beneficiary2 else None,
            "idplan": record.plan.id,
        }


def _wire_account_executive(
    executive: AccountExecutive, identification_type: IdentificationType,
) -> AccountExecutive:
    executive.identification_type = identification_type
    return executive


ACCOUNT_EXECUTIVE_GRAPH = JoinGraph(
    [
        Component(
            "account_executive", AccountExecutive,
            ("idaccountexecutive", "name", "identification"),
        ),
        Component(
            "identification_type", IdentificationType,
            ("ididentificationtype", "identificationtype"),
        ),
    ],
    _wire_account_executive,
)


class PersistentAccountExecutive(AuditedPersistent[AccountExecutive]):
    definition = EntityDefinition(
        noun="account executive",
        plural="account executives",
        table=AccountExecutiveModel.__table__,
        source="v_account_executive",
        id_column="idaccountexecutive",
        graph=ACCOUNT_EXECUTIVE_GRAPH,
    )

    def insert_values(self, record: AccountExecutive) -> dict:
        return {
            "name": record.name,
            "ididentificationtype": record.identification_type.id,
            "identification": record.identification,
        }
