"""
Idempotent seeding of ``user_setting`` rows.

``add_user_setting`` inserts one setting through a caller-supplied executor and
``add_user_settings`` does the same for an ordered batch. Neither opens, commits
or rolls back a transaction: the executor's owner does that.

Values are always bound as statement parameters, so keys and values may hold
quotes or any other characters.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import sqlalchemy as sa
from pydantic import ValidationError
from sqlalchemy.sql.elements import TextClause

from ..core.exceptions import SettingValidationError
from ..core.logging import get_logger
from ..models.user_setting import UserSetting
from ..schemas.user_setting import ConflictPolicy, RowShape, UserSettingConfig, UserSettingOptions

logger = get_logger(__name__)

USER_SETTING_TABLE = UserSetting.__tablename__

SIMPLE_COLUMNS = ("key", "defaultValue", "valueType")
FULL_COLUMNS = ("key", "userValue", "defaultValue", "linuxDefault", "macDefault", "windowsDefault", "valueType")

_COLUMN_TYPES = {
    "key": sa.String(),
    "userValue": sa.Text(),
    "defaultValue": sa.Text(),
    "linuxDefault": sa.Text(),
    "macDefault": sa.Text(),
    "windowsDefault": sa.Text(),
    "valueType": sa.SmallInteger(),
}


class StatementExecutor(Protocol):
    """Anything that can run a statement and be awaited, e.g. an AsyncConnection or AsyncSession."""

    async def execute(self, statement: Any) -> Any: ...


UserSettingEntry = UserSettingConfig | tuple[str, UserSettingOptions | Mapping[str, Any]]


def coerce_options(key: str | None, options: UserSettingOptions | Mapping[str, Any] | None) -> UserSettingOptions:
    """Turn a mapping of options (snake_case or camelCase keys) into UserSettingOptions."""
    if isinstance(options, UserSettingOptions):
        return options
    if options is None:
        raise SettingValidationError(key, "options are required", details={"key": key, "missing": ["options"]})
    try:
        return UserSettingOptions.model_validate(options)
    except ValidationError as e:
        raise SettingValidationError(
            key,
            f"invalid options ({e.error_count()} error(s))",
            details={"key": key, "errors": e.errors(include_url=False)},
        ) from e


def validate_user_setting(key: str | None, options: UserSettingOptions) -> None:
    """Raise SettingValidationError listing every missing required field."""
    if key is not None and not isinstance(key, str):
        raise SettingValidationError(
            str(key),
            f"key must be a string, not {type(key).__name__}",
            details={"key": key, "reason": "key must be a string"},
        )

    missing = []
    if not key:
        missing.append("key")
    if options.default_value is None:
        missing.append("defaultValue")
    if options.value_type is None:
        missing.append("valueType")
    if missing:
        raise SettingValidationError(
            key,
            f"missing required fields: {', '.join(missing)}",
            details={"key": key, "missing": missing},
        )


def build_user_setting_statement(key: str, options: UserSettingOptions) -> TextClause:
    """Build the INSERT for one setting.

    The simple shape names only ``key``, ``defaultValue`` and ``valueType`` and
    leaves the rest to column defaults. The full shape is used as soon as a user
    value or any platform default is given, and writes all seven columns.
    """
    validate_user_setting(key, options)

    values: dict[str, Any] = {
        "key": key,
        "defaultValue": options.default_value,
        "valueType": int(options.value_type),
    }
    if options.row_shape is RowShape.FULL:
        columns = FULL_COLUMNS
        values["userValue"] = options.user_value
        values["linuxDefault"] = options.linux_default
        values["macDefault"] = options.mac_default
        values["windowsDefault"] = options.windows_default
    else:
        columns = SIMPLE_COLUMNS

    column_list = ", ".join(f'"{column}"' for column in columns)
    param_list = ", ".join(f":{column}" for column in columns)
    sql = f"INSERT INTO {USER_SETTING_TABLE} ({column_list}) VALUES ({param_list})"
    if options.conflict_policy is ConflictPolicy.IGNORE:
        sql += ' ON CONFLICT ("key") DO NOTHING'

    return sa.text(sql).bindparams(
        *[sa.bindparam(column, values[column], type_=_COLUMN_TYPES[column]) for column in columns]
    )


async def add_user_setting(
    executor: StatementExecutor,
    key: str,
    options: UserSettingOptions | Mapping[str, Any],
) -> None:
    """Insert a single user setting.

    Raises SettingValidationError before touching the executor when input is
    missing. Anything the executor raises, including a duplicate key under the
    strict conflict policy, propagates unchanged.
    """
    resolved = coerce_options(key, options)
    statement = build_user_setting_statement(key, resolved)

    logger.debug(
        "Inserting user setting",
        extra={
            "setting_key": key,
            "row_shape": resolved.row_shape.value,
            "conflict_policy": resolved.conflict_policy.value,
        },
    )
    await executor.execute(statement)


def unpack_entry(entry: UserSettingEntry | Mapping[str, Any]) -> tuple[Any, Any]:
    """Split a batch entry into (key, options); options are coerced later, per entry."""
    if isinstance(entry, UserSettingConfig):
        return entry.key, entry.options
    if isinstance(entry, Mapping):
        return entry.get("key"), entry.get("options")
    try:
        key, options = entry
    except (TypeError, ValueError) as e:
        raise SettingValidationError(None, "batch entries must be (key, options) pairs") from e
    return key, options


async def add_user_settings(
    executor: StatementExecutor,
    settings: Iterable[UserSettingEntry | Mapping[str, Any]],
) -> None:
    """Insert several user settings in the given order.

    Entries run one at a time; each insert is awaited before the next starts
    because later entries may rely on earlier ones and the executor's
    transaction is not safe for concurrent use. The first failure stops the
    batch and is re-raised as-is, with a note naming the failing entry.
    """
    seeded = 0
    for index, entry in enumerate(settings):
        key = None
        try:
            key, options = unpack_entry(entry)
            await add_user_setting(executor, key, options)
        except Exception as e:
            logger.error(
                "Seeding user setting failed, remaining entries skipped",
                extra={"index": index, "setting_key": key, "error": str(e)},
            )
            e.add_note(f"while seeding user setting #{index} (key={key!r})")
            raise
        seeded += 1

    logger.info(f"Seeded {seeded} user settings", extra={"count": seeded})
