"""
Baseline user settings shipped with the application.

Usage (inside an async transaction):

    from settings_seed.seed_data.user_settings import DEFAULT_USER_SETTINGS
    from settings_seed.services import add_user_settings

    await add_user_settings(connection, DEFAULT_USER_SETTINGS)

Every entry ignores key conflicts, so reseeding an existing database leaves
values users have already changed alone. Order matters only to readers:
nothing here depends on an earlier row.
"""

from ..schemas.user_setting import UserSettingConfig, UserSettingOptions, UserSettingValueType

DEFAULT_USER_SETTINGS: list[UserSettingConfig] = [
    UserSettingConfig(
        key="theme",
        options=UserSettingOptions(
            default_value="system",
            value_type=UserSettingValueType.STRING,
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="menuStyle",
        options=UserSettingOptions(
            default_value="native",
            value_type=UserSettingValueType.STRING,
            linux_default="client",
            windows_default="client",
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="keymap",
        options=UserSettingOptions(
            default_value="default",
            value_type=UserSettingValueType.STRING,
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="lastUsedWorkspaceId",
        options=UserSettingOptions(
            default_value="-1",
            value_type=UserSettingValueType.INT,
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="zoomLevel",
        options=UserSettingOptions(
            default_value="1.0",
            value_type=UserSettingValueType.FLOAT,
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="editorOptions",
        options=UserSettingOptions(
            default_value="{}",
            value_type=UserSettingValueType.OBJECT,
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="recentConnectionIds",
        options=UserSettingOptions(
            default_value="[]",
            value_type=UserSettingValueType.ARRAY,
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="useNativeTitleBar",
        options=UserSettingOptions(
            default_value="true",
            value_type=UserSettingValueType.BOOLEAN,
            linux_default="false",
            insert_or_ignore=True,
        ),
    ),
    UserSettingConfig(
        key="showWelcomeTour",
        options=UserSettingOptions(
            default_value="true",
            value_type=UserSettingValueType.BOOLEAN,
            insert_or_ignore=True,
        ),
    ),
]
