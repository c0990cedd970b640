#!/usr/bin/env python3
"""
User settings seeding tool.

Inserts the baseline user settings into the user_setting table. Existing rows
are left untouched unless --strict is given, in which case any existing key
aborts the run and nothing is written.
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

# Add the src directory to the path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from settings_seed.core.database import create_engine_for_url, get_database_url  # noqa: E402
from settings_seed.core.logging import setup_logging  # noqa: E402
from settings_seed.services import render_user_settings, seed_user_settings  # noqa: E402


def _dialect_for(database_url: str | None) -> str:
    if database_url and database_url.startswith("sqlite"):
        return "sqlite"
    return "postgresql"


async def run(args: argparse.Namespace) -> int:
    """Run one seeding pass and return the number of settings processed."""
    if args.dry_run:
        database_url = args.database_url or os.getenv("SEED_DATABASE_URL")
        statements = await render_user_settings(dialect_name=_dialect_for(database_url), strict=args.strict)
        for statement in statements:
            print(f"{statement};")
        return len(statements)

    engine = create_engine_for_url(args.database_url or get_database_url())
    try:
        return await seed_user_settings(engine, create_table=args.create_table, strict=args.strict)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    """Main function."""
    parser = argparse.ArgumentParser(description="Seed baseline user settings")
    parser.add_argument("--database-url", help="Database URL (defaults to SEED_DATABASE_URL)")
    parser.add_argument("--create-table", action="store_true", help="Create the user_setting table if missing")
    parser.add_argument("--strict", action="store_true", help="Fail on existing keys instead of skipping them")
    parser.add_argument("--dry-run", action="store_true", help="Print the SQL instead of executing it")

    args = parser.parse_args(argv)

    if args.database_url:
        os.environ.setdefault("SEED_DATABASE_URL", args.database_url)
    try:
        if not args.dry_run:
            setup_logging()
        count = asyncio.run(run(args))
    except Exception as e:
        print(f"Error: {e}")
        for note in getattr(e, "__notes__", []):
            print(f"  {note}")
        return 1

    if not args.dry_run:
        print(f"Seeded {count} user settings")
    return 0


if __name__ == "__main__":
    sys.exit(main())
