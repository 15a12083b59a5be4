"""Task DTOs."""

from pydantic import Field

from rira_api.models.dto.base import ApiModel


class TaskDto(ApiModel):
    """Task response DTO. Status and priority are rendered by member name."""

    id: int = 0
    title: str
    description: str | None = None
    status: str
    priority: str
    due_date: str
    created_at: str | None = None
    updated_at: str | None = None
    is_deleted: bool = False


class TaskCreate(ApiModel):
    """Task payload for create requests.

    ``status`` and ``priority`` take a member name (case-insensitive) or its
    numeric value; when left blank they default to Pending and Medium.
    """

    title: str | None = None
    description: str | None = None
    status: str | int | None = Field(default=None, description="Pending, InProgress, Completed, Cancelled")
    priority: str | int | None = Field(default=None, description="Low, Medium, High, Critical")
    due_date: str | None = Field(default=None, description="Persian date, yyyy/MM/dd")
    created_at: str | None = None
    updated_at: str | None = None


class TaskUpdate(TaskCreate):
    """Task payload for update requests; every mutable field is overwritten."""

    pass
