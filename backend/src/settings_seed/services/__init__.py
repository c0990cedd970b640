"""
Services package for the settings seeder.

This package contains the user setting insertion helpers and the runner
that applies them inside a transaction.
"""

from .seeding_service import render_user_settings, seed_user_settings
from .statement_renderer import StatementRenderer
from .user_setting_seeder import (
    StatementExecutor,
    add_user_setting,
    add_user_settings,
    build_user_setting_statement,
)

__all__ = [
    "StatementExecutor",
    "StatementRenderer",
    "add_user_setting",
    "add_user_settings",
    "build_user_setting_statement",
    "render_user_settings",
    "seed_user_settings",
]
