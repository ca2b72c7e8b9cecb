"""initial schema: users, accounts, categories, transactions, budgets

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ENTRY_TYPE = sa.Enum("income", "expense", name="entrytype")
# second table using the same type: Postgres must not CREATE TYPE twice
_ENTRY_TYPE_REUSED = sa.Enum("income", "expense", name="entrytype").with_variant(
    postgresql.ENUM("income", "expense", name="entrytype", create_type=False),
    "postgresql",
)
_STR = sqlmodel.sql.sqltypes.AutoString()


def _owned_columns():
    # columns every per-user table carries
    return [
        sa.Column("id", _STR, nullable=False),
        sa.Column("user_id", _STR, nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _owned_indexes(table: str) -> None:
    op.create_index(f"ix_{table}_user_id", table, ["user_id"])
    op.create_index(f"ix_{table}_is_deleted", table, ["is_deleted"])


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", _STR, nullable=False),
        sa.Column("name", _STR, nullable=False),
        sa.Column("email", _STR, nullable=False),
        sa.Column("hashed_password", _STR, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_user_email"),
    )
    op.create_index("ix_user_email", "user", ["email"])

    op.create_table(
        "account",
        *_owned_columns(),
        sa.Column("name", _STR, nullable=False),
        sa.Column(
            "type",
            sa.Enum("cash", "bank", "credit", "ewallet", name="accounttype"),
            nullable=False,
        ),
        sa.Column("balance", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _owned_indexes("account")
    op.create_index("ix_account_type", "account", ["type"])

    op.create_table(
        "category",
        *_owned_columns(),
        sa.Column("name", _STR, nullable=False),
        sa.Column("type", _ENTRY_TYPE, nullable=False),
        sa.Column("description", _STR, nullable=True),
        sa.Column("color", _STR, nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _owned_indexes("category")
    op.create_index("ix_category_type", "category", ["type"])

    op.create_table(
        "transaction",
        *_owned_columns(),
        sa.Column("account_id", _STR, nullable=False),
        sa.Column("category_id", _STR, nullable=False),
        sa.Column("type", _ENTRY_TYPE_REUSED, nullable=False),
        sa.Column("amount", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("description", _STR, nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _owned_indexes("transaction")
    op.create_index("ix_transaction_account_id", "transaction", ["account_id"])
    op.create_index("ix_transaction_category_id", "transaction", ["category_id"])
    op.create_index("ix_transaction_type", "transaction", ["type"])
    op.create_index("ix_transaction_date", "transaction", ["date"])

    op.create_table(
        "budget",
        *_owned_columns(),
        sa.Column("category_id", _STR, nullable=False),
        sa.Column("amount", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column(
            "period",
            sa.Enum("weekly", "monthly", "yearly", name="budgetperiod"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    _owned_indexes("budget")
    op.create_index("ix_budget_category_id", "budget", ["category_id"])


def downgrade() -> None:
    for table in ("budget", "transaction", "category", "account"):
        op.drop_table(table)
    op.drop_index("ix_user_email", table_name="user")
    op.drop_table("user")
    # Postgres keeps enum types around after the tables are gone
    bind = op.get_bind()
    for enum_name in ("budgetperiod", "entrytype", "accounttype"):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
