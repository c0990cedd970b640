"""Create the user_setting table.

Revision ID: 001
Revises:
Create Date: 2026-10-18

Per-user settings key/value table. The platform default columns and valueType
carry server defaults so seeding can insert just key, defaultValue and valueType.
"""

import sqlalchemy as sa
from alembic import op

from migrations.helpers import drop_table_if_exists, table_exists

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    inspector = sa.inspect(op.get_bind())

    # Skip DDL when the table already exists (idempotent for partial runs)
    if table_exists(inspector, "user_setting"):
        return

    op.create_table(
        "user_setting",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("userValue", sa.Text(), nullable=True),
        sa.Column("defaultValue", sa.Text(), nullable=False),
        sa.Column("linuxDefault", sa.Text(), nullable=False, server_default=""),
        sa.Column("macDefault", sa.Text(), nullable=False, server_default=""),
        sa.Column("windowsDefault", sa.Text(), nullable=False, server_default=""),
        sa.Column("valueType", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("key", name="uq_user_setting_key"),
    )


def downgrade() -> None:
    inspector = sa.inspect(op.get_bind())
    drop_table_if_exists(inspector, "user_setting")
