"""Configuration Persistence — countries, cities, offices, identification types and plans.

Invariants:
    - A city update changes code and name only; moving it to another country is
      not an update
    - An office update never moves it to another city
    - Account executive assignments go through the executive_office link table
      and are audited like any other mutation
"""

from dal.core.column_mapping import MappingRegistry
from dal.core.domain_types import ActorId, ListResult
from dal.core.graph_mapper import Component, JoinGraph
from dal.core.repository_protocols import ConnectionProvider
from dal.models.city import CityModel
from dal.models.country import CountryModel
from dal.models.executive_office import ExecutiveOfficeModel
from dal.models.identification_type import IdentificationTypeModel
from dal.models.office import OfficeModel
from dal.models.plan import PlanModel
from dal.persistence.admon import ACCOUNT_EXECUTIVE_GRAPH
from dal.persistence.association import AssociationDefinition, AuditedAssociation
from dal.persistence.audit import AuditLogger
from dal.persistence.audited import AuditedPersistent
from dal.persistence.base import EntityDefinition
from dal.schemas.admon import AccountExecutive
from dal.schemas.config import City, Country, IdentificationType, Office, Plan


class PersistentCountry(AuditedPersistent[Country]):
    definition = EntityDefinition(
        noun="country",
        plural="countries",
        table=CountryModel.__table__,
        source="country",
        id_column="idcountry",
        graph=JoinGraph.single(Country, "idcountry", "code", "name"),
    )

    def insert_values(self, record: Country) -> dict:
        return {"code": record.code, "name": record.name}


def _wire_city(city: City, country: Country) -> City:
    city.country = country
    return city


class PersistentCity(AuditedPersistent[City]):
    definition = EntityDefinition(
        noun="city",
        plural="cities",
        table=CityModel.__table__,
        source="v_city",
        id_column="idcity",
        graph=JoinGraph(
            [
                Component("city", City, ("idcity", "code", "name")),
                Component(
                    "country", Country,
                    ("idcountry", "country_code", "country_name"),
                ),
            ],
            _wire_city,
        ),
    )

    def insert_values(self, record: City) -> dict:
        return {
            "idcountry": record.country.id,
            "code": record.code,
            "name": record.name,
        }

    def update_values(self, record: City) -> dict:
        return {"code": record.code, "name": record.name}


EXECUTIVE_OFFICE = AssociationDefinition(
    plural="account executives",
    owner_noun="office",
    table=ExecutiveOfficeModel.__table__,
    owner_column="idoffice",
    member_column="idaccountexecutive",
    linked_source="v_executive_office",
    member_source="v_account_executive",
    graph=ACCOUNT_EXECUTIVE_GRAPH,
)


def _wire_office(office: Office, city: City, country: Country) -> Office:
    city.country = country
    office.city = city
    return office


class PersistentOffice(AuditedPersistent[Office]):
    definition = EntityDefinition(
        noun="office",
        plural="offices",
        table=OfficeModel.__table__,
        source="v_office",
        id_column="idoffice",
        graph=JoinGraph(
            [
                Component(
                    "office", Office,
                    ("idoffice", "name", "address", "phone", "active"),
                ),
                Component("city", City, ("idcity", "city", "city_code")),
                Component(
                    "country", Country,
                    ("idcountry", "country_code", "country_name"),
                ),
            ],
            _wire_office,
        ),
    )

    def __init__(
        self,
        provider: ConnectionProvider,
        registry: MappingRegistry,
        audit: AuditLogger | None = None,
    ):
        super().__init__(provider, registry, audit)
        self._executives = AuditedAssociation(
            EXECUTIVE_OFFICE, provider, registry, self._audit,
        )

    def insert_values(self, record: Office) -> dict:
        return {"idcity": record.city.id, **self.update_values(record)}

    def update_values(self, record: Office) -> dict:
        return {
            "name": record.name,
            "address": record.address,
            "phone": record.phone,
            "active": record.active,
        }

    def list_account_executives(
        self, office: Office, filters: str = "", orders: str = "",
        limit: int = 0, offset: int = 0,
    ) -> ListResult[AccountExecutive]:
        """Account executives assigned to office."""
        return self._executives.list_linked(office, filters, orders, limit, offset)

    def list_not_account_executives(
        self, office: Office, filters: str = "", orders: str = "",
        limit: int = 0, offset: int = 0,
    ) -> ListResult[AccountExecutive]:
        """Account executives not yet assigned to office."""
        return self._executives.list_unlinked(office, filters, orders, limit, offset)

    def insert_account_executive(
        self, executive: AccountExecutive, office: Office, actor_id: ActorId | int,
    ) -> AccountExecutive:
        return self._executives.link(executive, office, actor_id)

    def delete_account_executive(
        self, executive: AccountExecutive, office: Office, actor_id: ActorId | int,
    ) -> AccountExecutive:
        return self._executives.unlink(executive, office, actor_id)


class PersistentIdentificationType(AuditedPersistent[IdentificationType]):
    definition = EntityDefinition(
        noun="identification type",
        plural="identification types",
        table=IdentificationTypeModel.__table__,
        source="identification_type",
        id_column="ididentificationtype",
        graph=JoinGraph.single(IdentificationType, "ididentificationtype", "name"),
    )

    def insert_values(self, record: IdentificationType) -> dict:
        return {"name": record.name}


class PersistentPlan(AuditedPersistent[Plan]):
    definition = EntityDefinition(
        noun="plan",
        plural="plans",
        table=PlanModel.__table__,
        source="plan",
        id_column="idplan",
        graph=JoinGraph.single(
            Plan,
            "idplan", "value", "initial_fee", "installments_number",
            "installment_value", "active", "description",
        ),
    )

    def insert_values(self, record: Plan) -> dict:
        return {
            "value": record.value,
            "initial_fee": record.initial_fee,
            "installments_number": record.installments_number,
            "installment_value": record.installment_value,
            "active": record.active,
            "description": record.description,
        }
