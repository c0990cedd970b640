"""Idempotent seeding of per-user application settings."""

from .core.exceptions import SettingsSeedException, SettingValidationError
from .schemas.user_setting import UserSettingConfig, UserSettingOptions, UserSettingValueType
from .services.user_setting_seeder import add_user_setting, add_user_settings

__all__ = [
    "SettingValidationError",
    "SettingsSeedException",
    "UserSettingConfig",
    "UserSettingOptions",
    "UserSettingValueType",
    "add_user_setting",
    "add_user_settings",
]
