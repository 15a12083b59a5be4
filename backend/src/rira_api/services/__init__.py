"""Services package."""

from rira_api.services.employee_service import EmployeeService
from rira_api.services.task_service import TaskService

__all__ = [
    "EmployeeService",
    "TaskService",
]
