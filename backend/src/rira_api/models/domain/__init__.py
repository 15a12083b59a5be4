"""Domain models package."""

from rira_api.models.domain.enums import (
    EducationLevel,
    Gender,
    TaskPriority,
    TaskStatus,
    display_name,
    parse_enum,
)

__all__ = [
    "Gender",
    "EducationLevel",
    "TaskStatus",
    "TaskPriority",
    "display_name",
    "parse_enum",
]
