"""
Initial schema: users and companies.

Revision ID: 20261017_000000_initial_schema
Revises:
Create Date: 2026-10-17 00:00:00
"""

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20261017_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Required extension for uuid_generate_v4
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp";')

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )

    op.create_table(
        "companies",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=True),
        sa.Column("logo", sa.String(length=2048), nullable=True),
        sa.Column("employees", sa.Integer(), nullable=True),
        sa.Column("tranch", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("jobs", sa.Text(), nullable=True),
        sa.Column("jobslink", sa.String(length=2048), nullable=True),
        sa.Column("sector", sa.String(length=255), nullable=True),
        sa.Column("twitter", sa.String(length=2048), nullable=True),
        sa.Column("facebook", sa.String(length=2048), nullable=True),
        sa.Column("instagram", sa.String(length=2048), nullable=True),
        sa.Column("youtube", sa.String(length=2048), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id", name="companies_pkey"),
    )
    op.create_index("ix_companies_created_at", "companies", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_companies_created_at", table_name="companies")
    op.drop_table("companies")
    op.drop_table("users")
