"""Tests for scripts/seed_user_settings.py."""

import importlib.util
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from settings_seed.seed_data.user_settings import DEFAULT_USER_SETTINGS

SCRIPT_PATH = Path(__file__).resolve().parents[4] / "scripts" / "seed_user_settings.py"


@pytest.fixture
def script(monkeypatch):
    spec = importlib.util.spec_from_file_location("seed_user_settings_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    # Leave the test runner's logging configuration alone
    monkeypatch.setattr(module, "setup_logging", lambda: None)
    return module


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'settings.db'}"


def test_dry_run_prints_sql_without_connecting(script, monkeypatch, capsys):
    monkeypatch.setattr(script, "create_engine_for_url", lambda *a, **kw: pytest.fail("dry run must not connect"))
    exit_code = script.main(["--dry-run", "--database-url", "sqlite:///unused.db"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert len(lines) == len(DEFAULT_USER_SETTINGS)
    assert all(line.startswith("INSERT INTO user_setting") and line.endswith(";") for line in lines)


def test_seeds_and_reseeds(script, database_url, capsys):
    assert script.main(["--database-url", database_url, "--create-table"]) == 0
    assert script.main(["--database-url", database_url]) == 0

    out = capsys.readouterr().out
    assert out.count(f"Seeded {len(DEFAULT_USER_SETTINGS)} user settings") == 2


def test_strict_run_reports_conflicting_entry(script, database_url, capsys):
    assert script.main(["--database-url", database_url, "--create-table"]) == 0

    exit_code = script.main(["--database-url", database_url, "--strict"])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "Error:" in out
    assert "while seeding user setting #0 (key='theme')" in out


@pytest.mark.parametrize(
    "env_url, dialect",
    [
        ("sqlite:///./settings.db", "sqlite"),
        ("postgresql://user:pw@localhost/app", "postgresql"),
    ],
)
def test_dry_run_dialect_follows_environment_url(script, monkeypatch, env_url, dialect):
    monkeypatch.setenv("SEED_DATABASE_URL", env_url)
    render = AsyncMock(return_value=[])
    monkeypatch.setattr(script, "render_user_settings", render)

    assert script.main(["--dry-run"]) == 0

    render.assert_awaited_once_with(dialect_name=dialect, strict=False)
