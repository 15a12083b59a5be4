"""Handler boundary: persistence failures become failure envelopes."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from rira_api.models.dto.response import ResponseEnvelope, conflict, fail
from rira_api.utils.secure_logging import log_error, log_warning, sanitize_exception_message

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def handler_boundary(
    action: str,
    conflict_message: str | None = None,
) -> Callable[[Callable[P, Awaitable[ResponseEnvelope]]], Callable[P, Awaitable[ResponseEnvelope]]]:
    """Catch store errors raised inside a service method.

    The session is rolled back and the error is returned as an envelope
    instead of propagating. With ``conflict_message`` set, unique-constraint
    violations become 409 envelopes; any other SQLAlchemy error becomes a 500
    envelope carrying the sanitized exception text.

    Args:
        action: Operation name used in messages, e.g. "create employee"
        conflict_message: Message for integrity violations, or None
    """

    def decorator(func: Callable[P, Awaitable[ResponseEnvelope]]) -> Callable[P, Awaitable[ResponseEnvelope]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ResponseEnvelope:
            service: Any = args[0]
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                await service.session.rollback()
                if conflict_message and isinstance(e, IntegrityError):
                    log_warning(logger, f"Integrity violation during {action}", e)
                    return conflict(conflict_message)
                log_error(logger, f"Failed to {action}", e)
                return fail(f"Failed to {action}: {sanitize_exception_message(e)}", 500)

        return wrapper

    return decorator
