"""Configuration Records — geographic lookups, offices, identification types and plans.

Invariants:
    - Nested relations (city.country, office.city) are None until read or set
    - Money fields are Decimal; the driver's floats are coerced on construction
"""

from decimal import Decimal

from pydantic import Field

from dal.schemas.base import Record


class Country(Record):
    code: str = ""
    name: str = ""


class City(Record):
    code: str = ""
    name: str = ""
    country: Country | None = None


class Office(Record):
    name: str = ""
    address: str | None = None
    phone: str | None = None
    active: bool = True
    city: City | None = None


class IdentificationType(Record):
    name: str = ""


class Plan(Record):
    """Payment plan: total value split into an initial fee plus installments."""
    value: Decimal = Decimal("0")
    initial_fee: Decimal = Decimal("0")
    installments_number: int = Field(default=0, ge=0)
    installment_value: Decimal = Decimal("0")
    active: bool = True
    description: str | None = None
