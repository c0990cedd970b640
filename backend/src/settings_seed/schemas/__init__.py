"""
Pydantic schemas for the settings seeder.
"""

from .user_setting import (
    ConflictPolicy,
    RowShape,
    UserSettingConfig,
    UserSettingOptions,
    UserSettingValueType,
)

__all__ = [
    "ConflictPolicy",
    "RowShape",
    "UserSettingConfig",
    "UserSettingOptions",
    "UserSettingValueType",
]
