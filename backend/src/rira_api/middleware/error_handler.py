"""Transport fault barrier.

Handlers return envelopes for every expected outcome. Anything that still
escapes a request is converted here into a ``{statusCode, message, detail}``
body without leaking stack traces or internal messages.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from rira_api.config import get_settings
from rira_api.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    RiraAPIError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    401: "Authentication required",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    429: "Too many requests",
    500: "An unexpected error occurred",
}

# Exception categories, checked in order
STATUS_BY_EXCEPTION: tuple[tuple[tuple[type[BaseException], ...], int], ...] = (
    ((ValueError, TypeError, BadRequestError), status.HTTP_400_BAD_REQUEST),
    ((NotFoundError, LookupError), status.HTTP_404_NOT_FOUND),
    ((UnauthorizedError, PermissionError), status.HTTP_401_UNAUTHORIZED),
    ((ConflictError,), status.HTTP_409_CONFLICT),
)


def status_for_exception(exc: BaseException) -> int:
    """Map an exception to the HTTP status of its category.

    Args:
        exc: Exception that escaped a request

    Returns:
        HTTP status code, 500 for anything uncategorized
    """
    for exc_types, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_types):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _fault_body(status_code: int, message: str, exc: BaseException | None = None) -> dict:
    detail = None
    if exc is not None and get_settings().debug:
        detail = type(exc).__name__
    return {"statusCode": status_code, "message": message, "detail": detail}


def _public_message(exc: BaseException, status_code: int) -> str:
    # Own exceptions carry messages written for callers
    if isinstance(exc, RiraAPIError):
        return exc.message
    return SAFE_ERROR_MESSAGES.get(status_code, "Request failed")


async def fault_barrier_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle any exception that escaped a route.

    Args:
        request: FastAPI request
        exc: Escaped exception

    Returns:
        JSONResponse with the category status and a safe message
    """
    status_code = status_for_exception(exc)
    if status_code >= 500:
        logger.error(f"Unhandled exception for {request.method} {request.url.path}", exc_info=exc)
    else:
        logger.warning(f"{type(exc).__name__} escaped {request.method} {request.url.path}")

    return JSONResponse(
        status_code=status_code,
        content=_fault_body(status_code, _public_message(exc, status_code), exc),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body and parameter schema errors as 400.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse listing the offending fields
    """
    logger.warning(f"Request validation error for {request.url.path}: {len(exc.errors())} error(s)")

    fields = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = loc[-1] if loc else "body"
        fields.append(f"{field}: {error.get('msg', 'Invalid value')}")

    message = "Invalid request: " + "; ".join(fields[:5]) if fields else SAFE_ERROR_MESSAGES[400]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_fault_body(status.HTTP_400_BAD_REQUEST, message, exc),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the barrier shape.

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with a generic message for the status
    """
    message = SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")
    return JSONResponse(
        status_code=exc.status_code,
        content=_fault_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


RATE_LIMIT_PROBLEM_TYPE = "https://datatracker.ietf.org/doc/html/rfc6585#section-4"
RATE_LIMIT_RETRY_AFTER_SECONDS = 60


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer 429 with an RFC 7807 problem document and Retry-After."""
    logger.warning(f"Rate limit exceeded on {request.url.path}: {exc.detail}")
    problem = {
        "type": RATE_LIMIT_PROBLEM_TYPE,
        "title": SAFE_ERROR_MESSAGES[429],
        "status": status.HTTP_429_TOO_MANY_REQUESTS,
        "detail": "Rate limit exceeded",
        "instance": request.url.path,
    }
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=problem,
        media_type="application/problem+json",
        headers={"Retry-After": str(RATE_LIMIT_RETRY_AFTER_SECONDS)},
    )
