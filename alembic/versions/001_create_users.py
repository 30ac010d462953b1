"""Create users table with partitioned email uniqueness.

Revision ID: 001_create_users
Revises:
Create Date: 2026-10-17

"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001_create_users"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("username", sa.Text, nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False),
        sa.Column(
            "is_customer",
            sa.Boolean,
            sa.Computed("role = 'Customer'", persisted=True),
            nullable=False,
        ),
        sa.Column("is_approved", sa.Boolean, nullable=False),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("mobile_number", sa.Text, nullable=True),
        sa.Column("vendor_details", postgresql.JSONB, nullable=True),
        sa.Column(
            "version",
            sa.Integer,
            nullable=False,
            server_default=sa.text("1"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_unique_constraint(
        "uq_users_email_partition",
        "users",
        ["email", "is_customer"],
    )
    op.create_check_constraint(
        "ck_users_role",
        "users",
        "role IN ('Customer', 'Vendor', 'Administrator', 'CSR')",
    )
    op.create_index("ix_users_email", "users", ["email"])


def downgrade() -> None:
    op.drop_index("ix_users_email", table_name="users")
    op.drop_constraint("ck_users_role", "users", type_="check")
    op.drop_constraint("uq_users_email_partition", "users", type_="unique")
    op.drop_table("users")
