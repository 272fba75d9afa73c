"""Mapping Tables — every column alias a query shape can return, per record type.

Invariants:
    - Each alias appears once per record type
    - Aliases cover both the record's own view and every view that embeds it under
      a role prefix (office_, owner_, beneficiary1_, plan_ ...)
    - build_mapping_registry() is called once at startup; the result is passed to
      every persistence component

Design Decisions:
    - Plain dict literals: adding a view column is a one-line change here
"""

from dal.core.column_mapping import ColumnMapping, MappingRegistry
from dal.schemas.admon import AccountExecutive, Registration
from dal.schemas.audit import AuditEntry
from dal.schemas.config import City, Country, IdentificationType, Office, Plan
from dal.schemas.crm import Beneficiary, Owner


COUNTRY = ColumnMapping(Country, {
    "idcountry": "id",
    "office_idcountry": "id",
    "code": "code",
    "country_code": "code",
    "office_country_code": "code",
    "name": "name",
    "country_name": "name",
    "office_country_name": "name",
})

CITY = ColumnMapping(City, {
    "idcity": "id",
    "office_idcity": "id",
    "code": "code",
    "city_code": "code",
    "office_city_code": "code",
    "name": "name",
    "city": "name",
    "city_name": "name",
    "office_city_name": "name",
})

OFFICE = ColumnMapping(Office, {
    "idoffice": "id",
    "name": "name",
    "office": "name",
    "address": "address",
    "office_address": "address",
    "phone": "phone",
    "office_phone": "phone",
    "active": "active",
    "office_active": "active",
})

IDENTIFICATION_TYPE = ColumnMapping(IdentificationType, {
    "ididentificationtype": "id",
    "owner_ididentificationtype": "id",
    "beneficiary1_ididentificationtype": "id",
    "beneficiary2_ididentificationtype": "id",
    "name": "name",
    "identificationtype": "name",
    "owner_identificationtype": "name",
    "beneficiary1_identificationtype": "name",
    "beneficiary2_identificationtype": "name",
})

PLAN = ColumnMapping(Plan, {
    "idplan": "id",
    "value": "value",
    "plan_value": "value",
    "initial_fee": "initial_fee",
    "plan_initial_fee": "initial_fee",
    "installments_number": "installments_number",
    "plan_installments_number": "installments_number",
    "installment_value": "installment_value",
    "plan_installment_value": "installment_value",
    "active": "active",
    "plan_active": "active",
    "description": "description",
    "plan_description": "description",
})

OWNER = ColumnMapping(Owner, {
    "idowner": "id",
    "name": "name",
    "owner": "name",
    "identification": "identification",
    "owner_identification": "identification",
    "address_home": "address_home",
    "owner_address_home": "address_home",
    "address_office": "address_office",
    "owner_address_office": "address_office",
    "phone_home": "phone_home",
    "owner_phone_home": "phone_home",
    "phone_office": "phone_office",
    "owner_phone_office": "phone_office",
    "email": "email",
    "owner_email": "email",
})

BENEFICIARY = ColumnMapping(Beneficiary, {
    "idbeneficiary": "id",
    "idbeneficiary1": "id",
    "idbeneficiary2": "id",
    "name": "name",
    "beneficiary1": "name",
    "beneficiary2": "name",
    "identification": "identification",
    "beneficiary1_identification": "identification",
    "beneficiary2_identification": "identification",
    "relationship": "relationship",
    "beneficiary1_relationship": "relationship",
    "beneficiary2_relationship": "relationship",
})

REGISTRATION = ColumnMapping(Registration, {
    "idregistration": "id",
    "date": "date",
    "contract_number": "contract_number",
})

ACCOUNT_EXECUTIVE = ColumnMapping(AccountExecutive, {
    "idaccountexecutive": "id",
    "name": "name",
    "accountexecutive": "name",
    "identification": "identification",
    "account_executive_identification": "identification",
})

AUDIT_ENTRY = ColumnMapping(AuditEntry, {
    "idlog": "id",
    "date": "date",
    "action": "action",
    "idtable": "row_id",
    "table_name": "table_name",
    "statement": "statement",
    "iduser": "actor_id",
})

ALL_MAPPINGS = (
    COUNTRY, CITY, OFFICE, IDENTIFICATION_TYPE, PLAN,
    OWNER, BENEFICIARY, REGISTRATION, ACCOUNT_EXECUTIVE, AUDIT_ENTRY,
)


def build_mapping_registry() -> MappingRegistry:
    """Registry holding every mapping table above."""
    return MappingRegistry(ALL_MAPPINGS)
