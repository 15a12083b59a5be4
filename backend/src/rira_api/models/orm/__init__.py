"""SQLAlchemy ORM models package."""

from rira_api.models.orm.base import Base
from rira_api.models.orm.employee import EmployeeORM
from rira_api.models.orm.task import TaskORM

__all__ = [
    "Base",
    "EmployeeORM",
    "TaskORM",
]
