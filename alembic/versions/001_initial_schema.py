"""Initial schema — lookups, customers, registrations, executives, audit log and views.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from dal.db.schema import VIEWS

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "country",
        sa.Column("idcountry", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(10), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
    )

    op.create_table(
        "city",
        sa.Column("idcity", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("idcountry", sa.Integer, sa.ForeignKey("country.idcountry"), nullable=False),
        sa.Column("code", sa.String(10), nullable=False, unique=True),
        sa.Column("name", sa.String(100), nullable=False),
    )

    op.create_table(
        "office",
        sa.Column("idoffice", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("idcity", sa.Integer, sa.ForeignKey("city.idcity"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.String(200), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "identification_type",
        sa.Column("ididentificationtype", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        "owner",
        sa.Column("idowner", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("identification", sa.String(50), nullable=False, unique=True),
        sa.Column(
            "ididentificationtype", sa.Integer,
            sa.ForeignKey("identification_type.ididentificationtype"), nullable=False,
        ),
        sa.Column("address_home", sa.String(200), nullable=True),
        sa.Column("address_office", sa.String(200), nullable=True),
        sa.Column("phone_home", sa.String(50), nullable=True),
        sa.Column("phone_office", sa.String(50), nullable=True),
        sa.Column("email", sa.String(200), nullable=True),
    )

    op.create_table(
        "beneficiary",
        sa.Column("idbeneficiary", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("idowner", sa.Integer, sa.ForeignKey("owner.idowner"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "ididentificationtype", sa.Integer,
            sa.ForeignKey("identification_type.ididentificationtype"), nullable=False,
        ),
        sa.Column("identification", sa.String(50), nullable=False),
        sa.Column("relationship", sa.String(50), nullable=True),
    )

    op.create_table(
        "plan",
        sa.Column("idplan", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("value", sa.Numeric(14, 2), nullable=False),
        sa.Column("initial_fee", sa.Numeric(14, 2), nullable=False),
        sa.Column("installments_number", sa.Integer, nullable=False),
        sa.Column("installment_value", sa.Numeric(14, 2), nullable=False),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("description", sa.String(500), nullable=True),
    )

    op.create_table(
        "registration",
        sa.Column("idregistration", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("idoffice", sa.Integer, sa.ForeignKey("office.idoffice"), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("contract_number", sa.String(50), nullable=False, unique=True),
        sa.Column("idowner", sa.Integer, sa.ForeignKey("owner.idowner"), nullable=False),
        sa.Column("idbeneficiary1", sa.Integer, sa.ForeignKey("beneficiary.idbeneficiary"), nullable=True),
        sa.Column("idbeneficiary2", sa.Integer, sa.ForeignKey("beneficiary.idbeneficiary"), nullable=True),
        sa.Column("idplan", sa.Integer, sa.ForeignKey("plan.idplan"), nullable=False),
    )

    op.create_table(
        "account_executive",
        sa.Column("idaccountexecutive", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "ididentificationtype", sa.Integer,
            sa.ForeignKey("identification_type.ididentificationtype"), nullable=False,
        ),
        sa.Column("identification", sa.String(50), nullable=False, unique=True),
    )

    op.create_table(
        "executive_office",
        sa.Column("idoffice", sa.Integer, sa.ForeignKey("office.idoffice"), primary_key=True),
        sa.Column(
            "idaccountexecutive", sa.Integer,
            sa.ForeignKey("account_executive.idaccountexecutive"), primary_key=True,
        ),
    )

    op.create_table(
        "log_db",
        sa.Column("idlog", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column("action", sa.String(1), nullable=False),
        sa.Column("idtable", sa.Integer, nullable=False, server_default="0"),
        sa.Column("table_name", sa.String(64), nullable=False),
        sa.Column("statement", sa.Text, nullable=False),
        sa.Column("iduser", sa.Integer, nullable=False),
    )

    for name, select in VIEWS.items():
        op.execute(f"CREATE VIEW {name} AS {select.strip()}")


def downgrade() -> None:
    for name in reversed(list(VIEWS)):
        op.execute(f"DROP VIEW IF EXISTS {name}")
    op.drop_table("log_db")
    op.drop_table("executive_office")
    op.drop_table("account_executive")
    op.drop_table("registration")
    op.drop_table("plan")
    op.drop_table("beneficiary")
    op.drop_table("owner")
    op.drop_table("identification_type")
    op.drop_table("office")
    op.drop_table("city")
    op.drop_table("country")
