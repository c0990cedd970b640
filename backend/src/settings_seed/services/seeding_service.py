"""
Seeding runner: owns the transaction the insertion helpers run in.

Used by ``scripts/seed_user_settings.py`` and by application start-up code
that wants the baseline settings present.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine

from ..core.database import create_tables, transaction
from ..core.logging import get_logger
from ..schemas.user_setting import UserSettingConfig, UserSettingOptions
from ..seed_data.user_settings import DEFAULT_USER_SETTINGS
from .statement_renderer import StatementRenderer
from .user_setting_seeder import UserSettingEntry, add_user_settings

logger = get_logger(__name__)


def _strict_options(options: Any) -> Any:
    if isinstance(options, UserSettingOptions):
        return options.model_copy(update={"insert_or_ignore": False})
    if isinstance(options, Mapping):
        strict = {k: v for k, v in options.items() if k not in ("insertOrIgnore", "insert_or_ignore")}
        strict["insert_or_ignore"] = False
        return strict
    return options


def _with_strict_policy(entry: UserSettingEntry | Mapping[str, Any]) -> Any:
    """Force the strict conflict policy without validating the entry.

    Validation stays with the batch, so a malformed entry is still reported
    with its position and the entries before it are still attempted.
    """
    if isinstance(entry, UserSettingConfig):
        return UserSettingConfig(key=entry.key, options=_strict_options(entry.options))
    if isinstance(entry, Mapping):
        return {**entry, "options": _strict_options(entry.get("options"))}
    try:
        key, options = entry
    except (TypeError, ValueError):
        # Reported by the batch
        return entry
    return key, _strict_options(options)


def _resolve_definitions(
    definitions: Iterable[UserSettingEntry | Mapping[str, Any]] | None,
    strict: bool,
) -> list[Any]:
    rows = list(DEFAULT_USER_SETTINGS if definitions is None else definitions)
    if strict:
        rows = [_with_strict_policy(entry) for entry in rows]
    return rows


async def seed_user_settings(
    engine: AsyncEngine | None = None,
    definitions: Iterable[UserSettingEntry | Mapping[str, Any]] | None = None,
    *,
    create_table: bool = False,
    strict: bool = False,
) -> int:
    """Seed settings inside a single transaction and return how many entries were processed.

    Defaults to the baseline catalog. With ``strict`` every entry fails on an
    existing key instead of skipping it; the whole transaction then rolls back.
    """
    rows = _resolve_definitions(definitions, strict)

    async with transaction(engine) as connection:
        if create_table:
            await create_tables(connection)
        await add_user_settings(connection, rows)

    logger.info(
        "User settings seeded",
        extra={"count": len(rows), "strict": strict, "create_table": create_table},
    )
    return len(rows)


async def render_user_settings(
    definitions: Iterable[UserSettingEntry | Mapping[str, Any]] | None = None,
    *,
    dialect_name: str = "postgresql",
    strict: bool = False,
) -> list[str]:
    """Return the SQL a seeding run would execute, without connecting to a database."""
    renderer = StatementRenderer(dialect_name)
    await add_user_settings(renderer, _resolve_definitions(definitions, strict))
    return renderer.statements
