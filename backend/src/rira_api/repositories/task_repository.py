"""Task repository.

Every read goes through the ``is_deleted == false`` filter; soft-deleted
tasks are only reachable through ``get_by_id``.
"""

from sqlalchemy import select

from rira_api.models.orm.task import TaskORM
from rira_api.repositories.base import BaseRepository


class TaskRepository(BaseRepository[TaskORM]):
    """Repository for task operations."""

    model = TaskORM

    async def get_active(self, id: int) -> TaskORM | None:
        """Get a task that has not been soft-deleted.

        Args:
            id: Task ID

        Returns:
            TaskORM or None if missing or deleted
        """
        result = await self.session.execute(
            select(TaskORM).where(TaskORM.id == id, TaskORM.is_deleted.is_(False))
        )
        return result.scalar_one_or_none()

    async def get_all_active(self) -> list[TaskORM]:
        """Get all tasks that have not been soft-deleted, newest first.

        Returns:
            List of tasks ordered by ID descending
        """
        result = await self.session.execute(
            select(TaskORM)
            .where(TaskORM.is_deleted.is_(False))
            .order_by(TaskORM.id.desc())
        )
        return list(result.scalars().all())

    async def soft_delete(self, task: TaskORM) -> TaskORM:
        """Mark a task as deleted without removing the row.

        Args:
            task: Loaded task

        Returns:
            The updated task
        """
        task.is_deleted = True
        return await self.save(task)
