"""Task ORM model."""

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from rira_api.models.domain.enums import TaskPriority, TaskStatus
from rira_api.models.orm.base import Base, IntEnumType, IntIdMixin


class TaskORM(Base, IntIdMixin):
    """Task database model.

    Tasks are soft-deleted: ``is_deleted`` is set instead of removing the row.
    Dates are ``yyyy/MM/dd`` Persian-calendar strings.
    """

    __tablename__ = "tasks"

    title: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        IntEnumType(TaskStatus),
        default=TaskStatus.PENDING,
        nullable=False,
    )
    priority: Mapped[TaskPriority] = mapped_column(
        IntEnumType(TaskPriority),
        default=TaskPriority.MEDIUM,
        nullable=False,
    )
    due_date: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[str | None] = mapped_column(String(10), nullable=True)
    updated_at: Mapped[str | None] = mapped_column(String(10), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (Index("idx_tasks_is_deleted", "is_deleted"),)
