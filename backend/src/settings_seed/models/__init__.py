"""
Database models for the settings seeder.
"""

from .user_setting import UserSetting

__all__ = [
    "UserSetting",
]
