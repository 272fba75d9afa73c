"""Customer Persistence — owners and beneficiaries.

Invariants:
    - A beneficiary row carries its owner and two identification types: the
      owner's and its own, each read through a differently aliased column pair
    - list_by_owner() never returns another owner's beneficiaries, whatever
      the caller's filter says
"""

from dal.core.domain_types import ListResult
from dal.core.graph_mapper import Component, JoinGraph
from dal.core.query_builder import and_filters
from dal.models.beneficiary import BeneficiaryModel
from dal.models.owner import OwnerModel
from dal.persistence.audited import AuditedPersistent
from dal.persistence.base import EntityDefinition
from dal.schemas.config import IdentificationType
from dal.schemas.crm import Beneficiary, Owner

OWNER_COLUMNS = (
    "idowner", "name", "identification", "address_home", "address_office",
    "phone_home", "phone_office", "email",
)


def _wire_owner(owner: Owner, identification_type: IdentificationType) -> Owner:
    owner.identification_type = identification_type
    return owner


class PersistentOwner(AuditedPersistent[Owner]):
    definition = EntityDefinition(
        noun="owner",
        plural="owners",
        table=OwnerModel.__table__,
        source="v_owner",
        id_column="idowner",
        graph=JoinGraph(
            [
                Component("owner", Owner, OWNER_COLUMNS),
                Component(
                    "identification_type", IdentificationType,
                    ("ididentificationtype", "identificationtype"),
                ),
            ],
            _wire_owner,
        ),
    )

    def insert_values(self, record: Owner) -> dict:
        return {
            "name": record.name,
            "identification": record.identification,
            "ididentificationtype": record.identification_type.id,
            "address_home": record.address_home,
            "address_office": record.address_office,
            "phone_home": record.phone_home,
            "phone_office": record.phone_office,
            "email": record.email,
        }


def _wire_beneficiary(
    beneficiary: Beneficiary,
    owner: Owner,
    owner_identification_type: IdentificationType,
    identification_type: IdentificationType,
) -> Beneficiary:
    owner.identification_type = owner_identification_type
    beneficiary.identification_type = identification_type
    beneficiary.owner = owner
    return beneficiary


class PersistentBeneficiary(AuditedPersistent[Beneficiary]):
    definition = EntityDefinition(
        noun="beneficiary",
        plural="beneficiaries",
        table=BeneficiaryModel.__table__,
        source="v_beneficiary",
        id_column="idbeneficiary",
        graph=JoinGraph(
            [
                Component(
                    "beneficiary", Beneficiary,
                    ("idbeneficiary", "name", "identification", "relationship"),
                ),
                Component(
                    "owner", Owner,
                    ("idowner", "owner", "owner_identification", "owner_email"),
                ),
                Component(
                    "owner_identification_type", IdentificationType,
                    ("owner_ididentificationtype", "owner_identificationtype"),
                ),
                Component(
                    "identification_type", IdentificationType,
                    ("ididentificationtype", "identificationtype"),
                ),
            ],
            _wire_beneficiary,
        ),
    )

    def insert_values(self, record: Beneficiary) -> dict:
        return {"idowner": record.owner.id, **self.update_values(record)}

    def update_values(self, record: Beneficiary) -> dict:
        return {
            "name": record.name,
            "ididentificationtype": record.identification_type.id,
            "identification": record.identification,
            "relationship": record.relationship,
        }

    def list_by_owner(
        self,
        owner: Owner,
        filters: str = "",
        orders: str = "",
        limit: int = 0,
        offset: int = 0,
    ) -> ListResult[Beneficiary]:
        """Beneficiaries of one owner, further narrowed by filters."""
        scope = f"idowner = {int(owner.id)}"
        return self.list(and_filters(scope, filters), orders, limit, offset)
