"""Task record <-> DTO mapping.

Status and priority names parse case-insensitively. Unknown or blank values
fall back to Pending and Medium rather than failing; validation has already
rejected bad input by the time a request reaches these functions.
"""

from typing import Any

from rira_api.models.domain.enums import TaskPriority, TaskStatus, display_name, parse_enum
from rira_api.models.dto.task import TaskCreate, TaskDto
from rira_api.models.orm.task import TaskORM
from rira_api.utils.dates import persian_today

DEFAULT_TASK_STATUS = TaskStatus.PENDING
DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM


def parse_task_status(value: str | int | None) -> TaskStatus:
    """Parse a status, falling back to Pending."""
    return parse_enum(TaskStatus, value) or DEFAULT_TASK_STATUS


def parse_task_priority(value: str | int | None) -> TaskPriority:
    """Parse a priority, falling back to Medium."""
    return parse_enum(TaskPriority, value) or DEFAULT_TASK_PRIORITY


def date_or_today(value: str | None) -> str:
    """Pass a date string through, or substitute today's Persian date."""
    if value is None or not value.strip():
        return persian_today()
    return value


def task_to_dto(task: TaskORM) -> TaskDto:
    """Build a TaskDto from an ORM record."""
    return TaskDto(
        id=task.id,
        title=task.title,
        description=task.description,
        status=display_name(task.status),
        priority=display_name(task.priority),
        due_date=task.due_date,
        created_at=task.created_at,
        updated_at=task.updated_at,
        is_deleted=task.is_deleted,
    )


def task_fields_from_dto(data: TaskCreate | TaskDto) -> dict[str, Any]:
    """Map a task payload to ORM column values for a new record."""
    return {
        "title": data.title,
        "description": data.description,
        "status": parse_task_status(data.status),
        "priority": parse_task_priority(data.priority),
        "due_date": data.due_date,
        "created_at": date_or_today(data.created_at),
    }


def overwrite_task(task: TaskORM, data: TaskCreate | TaskDto) -> TaskORM:
    """Overwrite every mutable field of a task and stamp ``updated_at``."""
    task.title = data.title
    task.description = data.description
    task.status = parse_task_status(data.status)
    task.priority = parse_task_priority(data.priority)
    task.due_date = data.due_date
    task.updated_at = persian_today()
    return task
