"""API routers package."""

from rira_api.routers import employees, tasks

__all__ = [
    "employees",
    "tasks",
]
