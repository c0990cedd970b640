"""Logging configuration for the settings seeder.

Human-readable, aligned output for development and JSON lines for anything
that gets shipped to a log collector. Seeding runs are short-lived command
line processes, so everything goes to stdout.
"""

import json
import logging
import sys
import traceback
from datetime import UTC, datetime
from typing import ClassVar

from .config import get_settings_instance

# Internal guard to prevent double configuration when setup_logging() is called
# both by the seeding script and by library callers
_LOGGING_CONFIGURED = False

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RESERVED_RECORD_ATTRS = frozenset(
    [
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
    ]
)


class ColoredFormatter(logging.Formatter):
    """Custom colored formatter for human-readable logs with proper alignment."""

    # Color codes for different log levels
    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors and proper alignment."""
        level_color = self.COLORS.get(record.levelname, "") if self.use_colors else ""
        reset_color = self.COLORS["RESET"] if self.use_colors else ""

        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S")

        # Fixed-width logger name, truncated if too long
        logger_name = record.name
        if len(logger_name) > 25:
            logger_name = logger_name[:22] + "..."
        logger_name = f"{logger_name:25}"

        message = record.getMessage()

        # Only include short scalar extras
        extra_fields = []
        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_ATTRS or value is None:
                continue
            if isinstance(value, (str, int, float, bool)) and len(str(value)) < 100:
                extra_fields.append(f"{key}={value}")

        log_line = f"{timestamp} - {level_color}{record.levelname}{reset_color} - {logger_name} - {message}"

        if extra_fields:
            log_line += f" | {' '.join(extra_fields)}"

        if record.exc_info:
            exc_info = traceback.format_exception(*record.exc_info)
            log_line += f"\n{level_color}Exception:{reset_color}\n" + "".join(exc_info)

        return log_line


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type = record.exc_info[0]
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type is not None else "Unknown",
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging() -> None:
    """Set up logging configuration once per process."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings_instance()

    # Colors only in development and when output is a terminal
    use_colors = settings.environment == "development" and sys.stdout.isatty()

    formatter = JSONFormatter() if settings.log_format == "json" else ColoredFormatter(use_colors=use_colors)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(getattr(logging, settings.log_level))

    # SQLAlchemy logs every statement at INFO; keep it quiet unless something breaks
    for logger_name in ["sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.dialects", "sqlalchemy"]:
        log = logging.getLogger(logger_name)
        log.setLevel(logging.WARNING)
        log.handlers.clear()
        log.addHandler(console_handler)
        log.propagate = False

    for logger_name in ["aiosqlite", "asyncpg", "alembic"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger("settings_seed").setLevel(getattr(logging, settings.log_level))

    logging.getLogger("settings_seed.logging").info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "log_format": settings.log_format,
            "environment": settings.environment,
        },
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``settings_seed`` namespace."""
    if name == "settings_seed" or name.startswith("settings_seed."):
        return logging.getLogger(name)
    return logging.getLogger(f"settings_seed.{name}")
