"""Executor that renders statements to SQL text instead of running them."""

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Dialect

_DIALECTS = {
    "postgresql": postgresql.dialect,
    "sqlite": sqlite.dialect,
}


class StatementRenderer:
    """Collects each statement compiled with literal values for the given dialect.

    Stands in for a database connection on dry runs, so the exact SQL that
    would be executed can be reviewed.
    """

    def __init__(self, dialect_name: str = "postgresql") -> None:
        if dialect_name not in _DIALECTS:
            raise ValueError(f"Dialect must be one of: {sorted(_DIALECTS)}")
        self.dialect: Dialect = _DIALECTS[dialect_name]()
        self.statements: list[str] = []

    async def execute(self, statement: Any) -> None:
        compiled = statement.compile(dialect=self.dialect, compile_kwargs={"literal_binds": True})
        self.statements.append(str(compiled).strip())
