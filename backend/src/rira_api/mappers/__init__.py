"""Mapping between ORM records and wire DTOs."""

from rira_api.mappers.employee_mapper import (
    apply_employee_changes,
    employee_changes_from_update,
    employee_fields_from_create,
    employee_to_dto,
)
from rira_api.mappers.task_mapper import (
    overwrite_task,
    task_fields_from_dto,
    task_to_dto,
)

__all__ = [
    "employee_to_dto",
    "employee_fields_from_create",
    "employee_changes_from_update",
    "apply_employee_changes",
    "task_to_dto",
    "task_fields_from_dto",
    "overwrite_task",
]
