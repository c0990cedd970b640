"""Alembic migrations for the user_setting table."""
