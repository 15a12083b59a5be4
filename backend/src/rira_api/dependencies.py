"""Dependency injection factories for FastAPI routers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rira_api.database import get_db
from rira_api.services.employee_service import EmployeeService
from rira_api.services.task_service import TaskService


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db)


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    """Get TaskService instance."""
    return TaskService(db)
