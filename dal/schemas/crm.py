"""Customer Records — owners and their beneficiaries."""

from dal.schemas.base import Record
from dal.schemas.config import IdentificationType


class Owner(Record):
    name: str = ""
    identification: str = ""
    identification_type: IdentificationType | None = None
    address_home: str | None = None
    address_office: str | None = None
    phone_home: str | None = None
    phone_office: str | None = None
    email: str | None = None


class Beneficiary(Record):
    name: str = ""
    identification: str = ""
    relationship: str | None = None
    identification_type: IdentificationType | None = None
    owner: Owner | None = None
