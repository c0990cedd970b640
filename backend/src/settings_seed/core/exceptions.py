"""Custom exceptions for the settings seeder.

Failures raised by a statement executor (a duplicate key in strict mode or a
lost connection) are not represented here: they propagate to the caller exactly
as the executor raised them.
"""

from typing import Any


class SettingsSeedException(Exception):
    """Base exception class for the settings seeder."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class SettingValidationError(SettingsSeedException):
    """Raised when a user setting definition is missing required input.

    Always raised before a statement is built, so nothing reaches the store.
    """

    def __init__(self, key: str | None, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Invalid user setting '{key}': {reason}",
            error_code="USER_SETTING_VALIDATION_ERROR",
            details=details or {"key": key, "reason": reason},
        )


class DatabaseConnectionError(SettingsSeedException):
    """Raised when there's a database connection error (missing URL, engine creation)."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Database connection error: {reason}",
            error_code="DATABASE_CONNECTION_ERROR",
            details=details or {"reason": reason},
        )
