"""Data Transfer Objects package."""

from rira_api.models.dto.employee import EmployeeCreate, EmployeeDto, EmployeeUpdate
from rira_api.models.dto.response import ResponseEnvelope
from rira_api.models.dto.task import TaskCreate, TaskDto, TaskUpdate

__all__ = [
    "EmployeeDto",
    "EmployeeCreate",
    "EmployeeUpdate",
    "TaskDto",
    "TaskCreate",
    "TaskUpdate",
    "ResponseEnvelope",
]
