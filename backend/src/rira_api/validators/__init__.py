"""Request validators.

Each validator collects every violated rule before raising
``rira_api.exceptions.ValidationError``.
"""

from rira_api.validators.employee_validator import (
    validate_employee_create,
    validate_employee_update,
)
from rira_api.validators.task_validator import validate_task

__all__ = [
    "validate_employee_create",
    "validate_employee_update",
    "validate_task",
]
