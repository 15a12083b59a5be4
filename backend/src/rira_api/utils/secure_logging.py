"""Logging setup and helpers that keep sensitive data out of logs and responses."""

import logging
import re
from functools import lru_cache
from typing import Any

from rira_api.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

MAX_MESSAGE_LENGTH = 200

# Applied in order; connection strings before paths so URLs are not split
_REDACTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(postgresql|postgres|sqlite|http|https)(\+\w+)?://\S+"), "[URL]"),
    (re.compile(r"['\"]?(/[\w.\-]+/[\w./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?"), "[PATH]"),
    (re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+"), "[EMAIL]"),
)


def configure_logging() -> None:
    """Configure root logging from settings."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    # SQLAlchemy engine logs may contain bound parameters
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Reduce an exception to a single safe line.

    Connection strings, file paths and email addresses are masked. Only the
    first line is kept, which drops the SQL statement and parameters that
    SQLAlchemy appends, and the result is truncated.

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized error message
    """
    text = str(error)
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)

    text = text.split("\n", 1)[0].strip()
    if len(text) > MAX_MESSAGE_LENGTH:
        text = text[: MAX_MESSAGE_LENGTH - 3] + "..."
    return text


def _emit(
    logger: logging.Logger,
    level: int,
    message: str,
    error: Exception | None,
    context: dict[str, Any],
) -> None:
    # Debug mode keeps raw exception text, tracebacks for errors and extra context
    if error is None:
        logger.log(level, message, extra=context if is_debug_mode() else None)
    elif is_debug_mode():
        logger.log(level, f"{message}: {error}", exc_info=level >= logging.ERROR, extra=context)
    else:
        logger.log(level, f"{message}: {sanitize_exception_message(error)}")


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log an error, sanitized unless running in debug mode.

    Args:
        logger: The logger instance to use
        message: Generic log message without user data
        error: Optional exception to include
        **kwargs: Extra context, only attached in debug mode
    """
    _emit(logger, logging.ERROR, message, error, kwargs)


def log_warning(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log a warning, sanitized unless running in debug mode."""
    _emit(logger, logging.WARNING, message, error, kwargs)
