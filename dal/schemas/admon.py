"""Administration Records — registrations (sold contracts) and account executives.

Invariants:
    - office, owner and plan are required to insert; beneficiaries are optional
"""

import datetime as dt

from dal.schemas.base import Record
from dal.schemas.config import IdentificationType, Office, Plan
from dal.schemas.crm import Beneficiary, Owner


class Registration(Record):
    date: dt.date | None = None
    contract_number: str = ""
    office: Office | None = None
    owner: Owner | None = None
    beneficiary1: Beneficiary | None = None
    beneficiary2: Beneficiary | None = None
    plan: Plan | None = None


class AccountExecutive(Record):
    """Salesperson; office assignments are managed through PersistentOffice."""
    name: str = ""
    identification: str = ""
    identification_type: IdentificationType | None = None
