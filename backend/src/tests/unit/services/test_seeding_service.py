"""Tests for the seeding runner and the dry-run renderer."""

import pytest
import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError

from settings_seed.core.exceptions import SettingValidationError
from settings_seed.models import UserSetting
from settings_seed.schemas.user_setting import UserSettingConfig, UserSettingOptions, UserSettingValueType
from settings_seed.seed_data.user_settings import DEFAULT_USER_SETTINGS
from settings_seed.services import StatementRenderer, render_user_settings, seed_user_settings


async def _settings_by_key(engine):
    table = UserSetting.__table__
    async with engine.connect() as conn:
        result = await conn.execute(sa.select(table))
        return {row._mapping["key"]: dict(row._mapping) for row in result}


class TestDefaultCatalog:
    def test_covers_every_value_type(self):
        used = {entry.options.value_type for entry in DEFAULT_USER_SETTINGS}
        assert used == set(UserSettingValueType)

    def test_keys_unique_and_reseedable(self):
        keys = [entry.key for entry in DEFAULT_USER_SETTINGS]
        assert len(keys) == len(set(keys))
        assert all(entry.options.insert_or_ignore for entry in DEFAULT_USER_SETTINGS)

    def test_has_platform_specific_default(self):
        assert any(entry.options.has_platform_defaults for entry in DEFAULT_USER_SETTINGS)


class TestSeedUserSettings:
    @pytest.mark.asyncio
    async def test_seeds_catalog_into_new_table(self, engine):
        count = await seed_user_settings(engine, create_table=True)

        stored = await _settings_by_key(engine)
        assert count == len(DEFAULT_USER_SETTINGS)
        assert set(stored) == {entry.key for entry in DEFAULT_USER_SETTINGS}
        assert stored["menuStyle"]["linuxDefault"] == "client"
        assert stored["menuStyle"]["macDefault"] == ""

    @pytest.mark.asyncio
    async def test_reseeding_leaves_existing_rows(self, engine):
        await seed_user_settings(engine, create_table=True)
        async with engine.begin() as conn:
            await conn.execute(
                sa.update(UserSetting.__table__)
                .where(UserSetting.__table__.c.key == "theme")
                .values(userValue="dark")
            )

        await seed_user_settings(engine)

        stored = await _settings_by_key(engine)
        assert len(stored) == len(DEFAULT_USER_SETTINGS)
        assert stored["theme"]["userValue"] == "dark"

    @pytest.mark.asyncio
    async def test_strict_run_rolls_back_on_conflict(self, engine):
        await seed_user_settings(engine, [("theme", {"defaultValue": "dark", "valueType": 0})], create_table=True)

        with pytest.raises(IntegrityError):
            await seed_user_settings(
                engine,
                [
                    ("fontSize", {"defaultValue": "12", "valueType": 1, "insertOrIgnore": True}),
                    ("theme", {"defaultValue": "light", "valueType": 0, "insertOrIgnore": True}),
                ],
                strict=True,
            )

        stored = await _settings_by_key(engine)
        assert set(stored) == {"theme"}
        assert stored["theme"]["defaultValue"] == "dark"

    @pytest.mark.asyncio
    async def test_strict_run_reports_malformed_entry_position(self, engine):
        await seed_user_settings(engine, [("theme", {"defaultValue": "dark", "valueType": 0})], create_table=True)

        with pytest.raises(SettingValidationError) as exc_info:
            await seed_user_settings(
                engine,
                [
                    ("fontSize", {"defaultValue": "12", "valueType": 1}),
                    ("zoomLevel", {"valueType": 2, "insertOrIgnore": True}),
                ],
                strict=True,
            )

        assert exc_info.value.details["missing"] == ["defaultValue"]
        assert exc_info.value.__notes__ == ["while seeding user setting #1 (key='zoomLevel')"]
        assert set(await _settings_by_key(engine)) == {"theme"}

    @pytest.mark.asyncio
    async def test_strict_run_rejects_non_string_key(self, engine):
        await seed_user_settings(engine, [("theme", {"defaultValue": "dark", "valueType": 0})], create_table=True)

        with pytest.raises(SettingValidationError, match="key must be a string") as exc_info:
            await seed_user_settings(engine, [(123, {"defaultValue": "x", "valueType": 0})], strict=True)

        assert exc_info.value.__notes__ == ["while seeding user setting #0 (key=123)"]


class TestRenderUserSettings:
    @pytest.mark.asyncio
    async def test_renders_catalog_with_literal_values(self):
        statements = await render_user_settings()

        assert len(statements) == len(DEFAULT_USER_SETTINGS)
        assert statements[0].startswith('INSERT INTO user_setting ("key", "defaultValue", "valueType")')
        assert "'theme'" in statements[0]
        assert all(s.endswith('ON CONFLICT ("key") DO NOTHING') for s in statements)

    @pytest.mark.asyncio
    async def test_strict_rendering_drops_conflict_clause(self):
        statements = await render_user_settings([("theme", {"defaultValue": "dark", "valueType": 0})], strict=True)

        assert statements == ['INSERT INTO user_setting ("key", "defaultValue", "valueType") VALUES (\'theme\', \'dark\', 0)']

    @pytest.mark.asyncio
    async def test_strict_rendering_overrides_every_entry_form(self):
        options = {"default_value": "dark", "value_type": 0, "insert_or_ignore": True}
        statements = await render_user_settings(
            [
                ("a", options),
                {"key": "b", "options": {"defaultValue": "dark", "valueType": 0, "insertOrIgnore": True}},
                UserSettingConfig(key="c", options=UserSettingOptions(**options)),
                ("d", UserSettingOptions(**options)),
            ],
            strict=True,
        )

        assert len(statements) == 4
        assert not any("ON CONFLICT" in s for s in statements)

    @pytest.mark.asyncio
    async def test_quotes_escaped_in_rendered_sql(self):
        statements = await render_user_settings(
            [("greeting", {"defaultValue": "it's", "valueType": 0, "macDefault": None, "userValue": None})],
            dialect_name="sqlite",
        )

        assert "'it''s'" in statements[0]

    @pytest.mark.asyncio
    async def test_null_user_value_rendered(self):
        statements = await render_user_settings(
            [("a", {"defaultValue": "x", "valueType": 0, "linuxDefault": "y"})], dialect_name="sqlite"
        )
        assert "NULL" in statements[0]

    def test_unknown_dialect_rejected(self):
        with pytest.raises(ValueError, match="Dialect must be one of"):
            StatementRenderer("oracle")
