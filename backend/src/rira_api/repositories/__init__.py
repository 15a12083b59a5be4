"""Repositories package."""

from rira_api.repositories.base import BaseRepository
from rira_api.repositories.employee_repository import EmployeeRepository
from rira_api.repositories.task_repository import TaskRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "TaskRepository",
]
