"""Task command and query handlers."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from rira_api.exceptions import TaskNotFoundError, ValidationError
from rira_api.mappers.task_mapper import overwrite_task, task_fields_from_dto, task_to_dto
from rira_api.models.dto.response import ResponseEnvelope, bad_request, created, not_found, ok
from rira_api.models.dto.task import TaskCreate, TaskDto, TaskUpdate
from rira_api.repositories.task_repository import TaskRepository
from rira_api.services.boundary import handler_boundary
from rira_api.validators.task_validator import validate_task

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task CRUD operations.

    Tasks are soft-deleted, and deleted tasks are invisible to every read.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.task_repo = TaskRepository(session)

    @handler_boundary("create task")
    async def create_task(self, data: TaskCreate) -> ResponseEnvelope[TaskDto]:
        """Create a task.

        Args:
            data: Task payload

        Returns:
            Envelope with the created task (201), or a 400/500 failure
        """
        try:
            validate_task(data)
        except ValidationError as e:
            logger.info(f"Task create rejected by validation: {len(e.errors)} error(s)")
            return bad_request(e.message)

        task = await self.task_repo.create(**task_fields_from_dto(data), is_deleted=False)
        await self.session.commit()

        logger.info(f"Created task {task.id}")
        return created(task_to_dto(task), "Task created successfully")

    @handler_boundary("update task")
    async def update_task(self, task_id: int, data: TaskUpdate) -> ResponseEnvelope[TaskDto]:
        """Overwrite all mutable fields of a task.

        Args:
            task_id: Task ID
            data: Task payload

        Returns:
            Envelope with the updated task, or a 400/404/500 failure
        """
        task = await self.task_repo.get_active(task_id)
        if task is None:
            return not_found(TaskNotFoundError(task_id).message)

        try:
            validate_task(data)
        except ValidationError as e:
            logger.info(f"Task {task_id} update rejected by validation")
            return bad_request(e.message)

        overwrite_task(task, data)
        await self.task_repo.save(task)
        await self.session.commit()

        logger.info(f"Updated task {task.id}")
        return ok(task_to_dto(task), "Task updated successfully")

    @handler_boundary("delete task")
    async def delete_task(self, task_id: int) -> ResponseEnvelope[int]:
        """Soft-delete a task.

        Args:
            task_id: Task ID

        Returns:
            Envelope with the task ID, or a 404/500 failure
        """
        task = await self.task_repo.get_active(task_id)
        if task is None:
            return not_found(TaskNotFoundError(task_id).message)

        await self.task_repo.soft_delete(task)
        await self.session.commit()

        logger.info(f"Soft-deleted task {task_id}")
        return ok(task.id, "Task deleted successfully")

    @handler_boundary("load task")
    async def get_task(self, task_id: int) -> ResponseEnvelope[TaskDto]:
        """Get a single task that has not been deleted.

        Args:
            task_id: Task ID

        Returns:
            Envelope with the task DTO, or a 404/500 failure
        """
        task = await self.task_repo.get_active(task_id)
        if task is None:
            return not_found(TaskNotFoundError(task_id).message)
        return ok(task_to_dto(task), "Task retrieved successfully")

    @handler_boundary("load tasks")
    async def get_tasks(self) -> ResponseEnvelope[list[TaskDto]]:
        """Get all tasks that have not been deleted, newest first.

        An empty list is a success.

        Returns:
            Envelope with the task DTOs, or a 500 failure
        """
        tasks = await self.task_repo.get_all_active()
        return ok([task_to_dto(task) for task in tasks], "Tasks retrieved successfully")
