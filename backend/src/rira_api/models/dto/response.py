"""Uniform response envelope returned by every handler."""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from fastapi.responses import JSONResponse
from pydantic import Field

from rira_api.models.dto.base import ApiModel

T = TypeVar("T")


class ResponseEnvelope(ApiModel, Generic[T]):
    """Envelope with success flag, message, payload and HTTP-style status."""

    success: bool
    message: str = ""
    data: T | None = None
    status_code: int = 200
    timestamp_utc: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_response(self) -> JSONResponse:
        """Render as a JSON response whose HTTP status is ``status_code``."""
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(mode="json", by_alias=True),
        )


def ok(data: Any = None, message: str = "Operation completed successfully", status_code: int = 200) -> ResponseEnvelope:
    """Build a success envelope."""
    return ResponseEnvelope(success=True, message=message, data=data, status_code=status_code)


def created(data: Any = None, message: str = "Created successfully") -> ResponseEnvelope:
    """Build a 201 success envelope."""
    return ok(data, message, status_code=201)


def fail(message: str = "An error occurred while processing the request", status_code: int = 500) -> ResponseEnvelope:
    """Build a failure envelope."""
    return ResponseEnvelope(success=False, message=message, data=None, status_code=status_code)


def bad_request(message: str) -> ResponseEnvelope:
    """Build a 400 failure envelope."""
    return fail(message, status_code=400)


def not_found(message: str = "Requested resource was not found") -> ResponseEnvelope:
    """Build a 404 failure envelope."""
    return fail(message, status_code=404)


def conflict(message: str) -> ResponseEnvelope:
    """Build a 409 failure envelope."""
    return fail(message, status_code=409)
