"""Domain-specific exceptions for the Rira API.

Handlers convert these into response envelopes themselves; anything that
still escapes is mapped to an HTTP status by the fault barrier in
``rira_api.middleware.error_handler``.
"""

from typing import Any


class RiraAPIError(Exception):
    """Base exception for all Rira API errors."""

    status_code: int = 500

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class BadRequestError(RiraAPIError):
    """Raised when a required argument is missing or malformed."""

    status_code = 400


class ValidationError(BadRequestError):
    """Raised when input violates one or more declared rules.

    Carries every violated rule, in declaration order.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            "Validation failed: " + "; ".join(self.errors),
            {"errors": self.errors},
        )


# =============================================================================
# Authentication Errors (401)
# =============================================================================


class UnauthorizedError(RiraAPIError):
    """Raised when a caller is not allowed to perform an operation."""

    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(RiraAPIError):
    """Base class for resource not found errors."""

    status_code = 404


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: int | None = None) -> None:
        message = "Employee not found"
        if employee_id is not None:
            message = f"Employee with id {employee_id} not found"
        details = {"employee_id": employee_id} if employee_id is not None else {}
        super().__init__(message, details)


class TaskNotFoundError(NotFoundError):
    """Raised when a task cannot be found or has been deleted."""

    def __init__(self, task_id: int | None = None) -> None:
        message = "Task not found"
        if task_id is not None:
            message = f"Task with id {task_id} not found or already deleted"
        details = {"task_id": task_id} if task_id is not None else {}
        super().__init__(message, details)


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(RiraAPIError):
    """Base class for resource conflict errors."""

    status_code = 409


class DuplicateEmployeeError(ConflictError):
    """Raised when an employee with the same email or mobile number exists."""

    def __init__(self, email: str | None = None, mobile_number: str | None = None) -> None:
        details: dict[str, Any] = {}
        if email:
            details["email"] = email
        if mobile_number:
            details["mobile_number"] = mobile_number
        super().__init__("Email or mobile number is already registered", details)
