"""
Existence checks shared by the user_setting revisions.

Seeding may have created ``user_setting`` through ``--create-table`` before
Alembic ever ran, so revisions look before they create or drop.
"""

from typing import Any

from alembic import op


def table_exists(inspector: Any, table_name: str) -> bool:
    """Whether ``table_name`` is already present on the inspected connection."""
    return table_name in inspector.get_table_names()


def drop_table_if_exists(inspector: Any, table_name: str) -> None:
    """Drop ``table_name`` if it is there; a missing table is left alone."""
    if table_exists(inspector, table_name):
        op.drop_table(table_name)
