"""ORM Models — SQLAlchemy declarative table models for every persisted entity.

Invariants:
    - All models inherit from Base (db/base.py)
    - Primary keys are integer, autoincrement, named id<table>

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from dal.models.country import CountryModel  # noqa: F401
from dal.models.city import CityModel  # noqa: F401
from dal.models.office import OfficeModel  # noqa: F401
from dal.models.identification_type import IdentificationTypeModel  # noqa: F401
from dal.models.owner import OwnerModel  # noqa: F401
from dal.models.beneficiary import BeneficiaryModel  # noqa: F401
from dal.models.plan import PlanModel  # noqa: F401
from dal.models.registration import RegistrationModel  # noqa: F401
from dal.models.log_db import AuditLogModel  # noqa: F401
from dal.models.account_executive import AccountExecutiveModel  # noqa: F401
from dal.models.executive_office import ExecutiveOfficeModel  # noqa: F401
