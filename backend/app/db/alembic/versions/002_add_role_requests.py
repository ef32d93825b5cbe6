"""add role requests and profile details

Revision ID: 002
Revises: 001
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Add role_request table and profile bio/country."""
    op.create_table(
        "role_request",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("requested_role", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default="pending"),
        sa.Column("reviewed_by", sa.Uuid(), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(["user_id"], ["profile.user_id"], ondelete="CASCADE"),
    )
    op.create_index("idx_role_request_status", "role_request", ["status", "created_at"])

    with op.batch_alter_table("profile") as batch_op:
        batch_op.add_column(sa.Column("bio", sa.Text(), nullable=True))
        batch_op.add_column(sa.Column("country", sa.Text(), nullable=True))


def downgrade() -> None:
    """Drop role_request table and profile bio/country."""
    with op.batch_alter_table("profile") as batch_op:
        batch_op.drop_column("country")
        batch_op.drop_column("bio")

    op.drop_index("idx_role_request_status", table_name="role_request")
    op.drop_table("role_request")
