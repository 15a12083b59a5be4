"""Task validation rules."""

from rira_api.constants.validation import (
    PERSIAN_DATE_PATTERN,
    TASK_DESCRIPTION_MAX_LENGTH,
    TASK_TITLE_MAX_LENGTH,
)
from rira_api.exceptions import ValidationError
from rira_api.models.domain.enums import TaskPriority, TaskStatus
from rira_api.models.dto.task import TaskCreate
from rira_api.utils.validation import (
    exceeds_max_length,
    is_blank,
    is_defined_member,
    matches_pattern,
)


def collect_task_errors(data: TaskCreate) -> list[str]:
    """Run the task rule set and collect every violation.

    Status and priority are only checked when given; blank values are
    resolved to their defaults during mapping.
    """
    errors: list[str] = []

    if is_blank(data.title):
        errors.append("Task title is required.")
    elif exceeds_max_length(data.title, TASK_TITLE_MAX_LENGTH):
        errors.append(f"Task title must not exceed {TASK_TITLE_MAX_LENGTH} characters.")

    if exceeds_max_length(data.description, TASK_DESCRIPTION_MAX_LENGTH):
        errors.append(f"Description must not exceed {TASK_DESCRIPTION_MAX_LENGTH} characters.")

    if not is_blank(_as_text(data.status)) and not is_defined_member(TaskStatus, data.status):
        errors.append("Status value is not valid.")

    if not is_blank(_as_text(data.priority)) and not is_defined_member(TaskPriority, data.priority):
        errors.append("Priority value is not valid.")

    if is_blank(data.due_date):
        errors.append("Due date is required.")
    elif not matches_pattern(data.due_date, PERSIAN_DATE_PATTERN):
        errors.append("Due date must be in yyyy/MM/dd format.")

    for label, value in (("Created date", data.created_at), ("Updated date", data.updated_at)):
        if not is_blank(value) and not matches_pattern(value, PERSIAN_DATE_PATTERN):
            errors.append(f"{label} must be in yyyy/MM/dd format.")

    return errors


def _as_text(value: str | int | None) -> str | None:
    return None if value is None else str(value)


def validate_task(data: TaskCreate) -> None:
    """Validate a task create or update payload.

    Raises:
        ValidationError: With every violated rule
    """
    errors = collect_task_errors(data)
    if errors:
        raise ValidationError(errors)
