"""FundOps reconciliation tables

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("role_global", sa.String(length=50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "fundops_companies",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("legal_name", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "fundops_investors",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("company_id", sa.String(length=36), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("client_name", sa.String(length=255), nullable=True),
        sa.Column("client_company_id", sa.String(length=36), nullable=True),
        sa.Column("client_company_match_type", sa.String(length=20), nullable=True),
        sa.Column("client_company_matched_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["company_id"], ["fundops_companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["client_company_id"], ["fundops_companies.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "client_company_match_type IS NULL OR client_company_match_type IN ('manual', 'exact', 'normalized')",
            name="ck_fundops_investors_match_type",
        ),
    )
    op.create_index("ix_fundops_investors_company_id", "fundops_investors", ["company_id"], unique=False)
    op.create_index("ix_fundops_investors_client_company_id", "fundops_investors", ["client_company_id"], unique=False)
    op.create_index(
        "ix_fundops_investors_company_client",
        "fundops_investors",
        ["company_id", "client_company_id"],
        unique=False,
    )

    op.create_table(
        "fundops_company_users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("company_id", sa.String(length=36), nullable=False),
        sa.Column("role", sa.String(length=50), nullable=False, server_default="company_admin"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["company_id"], ["fundops_companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "company_id", name="uq_fundops_company_users_user_company"),
    )
    op.create_index("ix_fundops_company_users_user_id", "fundops_company_users", ["user_id"], unique=False)
    op.create_index("ix_fundops_company_users_company_id", "fundops_company_users", ["company_id"], unique=False)

    op.create_table(
        "fundops_investor_users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("investor_id", sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["investor_id"], ["fundops_investors.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "investor_id", name="uq_fundops_investor_users_user_investor"),
    )
    op.create_index("ix_fundops_investor_users_user_id", "fundops_investor_users", ["user_id"], unique=False)
    op.create_index("ix_fundops_investor_users_investor_id", "fundops_investor_users", ["investor_id"], unique=False)

    op.create_table(
        "fundops_investor_accounts",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("investor_id", sa.String(length=36), nullable=False),
        sa.Column("company_id", sa.String(length=36), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["investor_id"], ["fundops_investors.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["company_id"], ["fundops_companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_fundops_investor_accounts_investor_id", "fundops_investor_accounts", ["investor_id"], unique=False)
    op.create_index("ix_fundops_investor_accounts_company_id", "fundops_investor_accounts", ["company_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_fundops_investor_accounts_company_id", table_name="fundops_investor_accounts")
    op.drop_index("ix_fundops_investor_accounts_investor_id", table_name="fundops_investor_accounts")
    op.drop_table("fundops_investor_accounts")
    op.drop_index("ix_fundops_investor_users_investor_id", table_name="fundops_investor_users")
    op.drop_index("ix_fundops_investor_users_user_id", table_name="fundops_investor_users")
    op.drop_table("fundops_investor_users")
    op.drop_index("ix_fundops_company_users_company_id", table_name="fundops_company_users")
    op.drop_index("ix_fundops_company_users_user_id", table_name="fundops_company_users")
    op.drop_table("fundops_company_users")
    op.drop_index("ix_fundops_investors_company_client", table_name="fundops_investors")
    op.drop_index("ix_fundops_investors_client_company_id", table_name="fundops_investors")
    op.drop_index("ix_fundops_investors_company_id", table_name="fundops_investors")
    op.drop_table("fundops_investors")
    op.drop_table("fundops_companies")
    op.drop_table("profiles")
