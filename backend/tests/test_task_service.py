"""Tests for TaskService handlers."""

import pytest

from rira_api.models.domain import TaskPriority, TaskStatus
from rira_api.models.dto.task import TaskCreate, TaskUpdate
from rira_api.repositories import TaskRepository
from rira_api.services import TaskService
from rira_api.utils.dates import persian_today


@pytest.fixture
def service(session) -> TaskService:
    return TaskService(session)


class TestCreateTask:
    """CreateTask handler."""

    async def test_buy_milk_gets_defaults(self, service):
        result = await service.create_task(TaskCreate(title="Buy milk", due_date="1404/07/19"))

        assert result.success is True
        assert result.status_code == 201
        task = result.data
        assert task.id > 0
        assert task.title == "Buy milk"
        assert task.status == "Pending"
        assert task.priority == "Medium"
        assert task.due_date == "1404/07/19"
        assert task.created_at == persian_today()
        assert task.updated_at is None
        assert task.is_deleted is False

        listed = await service.get_tasks()
        assert [dto.id for dto in listed.data] == [task.id]

    async def test_status_name_round_trips(self, service, session):
        result = await service.create_task(
            TaskCreate(title="Review", due_date="1404/07/20", status="inprogress", priority=4)
        )

        assert result.data.status == "InProgress"
        assert result.data.priority == "Critical"
        stored = await TaskRepository(session).get_by_id(result.data.id)
        assert stored.status is TaskStatus.IN_PROGRESS
        assert stored.priority is TaskPriority.CRITICAL

    async def test_validation_failure(self, service, session):
        result = await service.create_task(TaskCreate(title="", due_date="tomorrow", status="Someday"))

        assert result.success is False
        assert result.status_code == 400
        assert result.message == (
            "Validation failed: Task title is required.; Status value is not valid.; "
            "Due date must be in yyyy/MM/dd format."
        )
        assert await TaskRepository(session).count() == 0

    @pytest.mark.parametrize("status", ["--1", "²"])
    async def test_malformed_numeric_status_is_rejected(self, service, session, status):
        result = await service.create_task(TaskCreate(title="x", due_date="1404/07/19", status=status))

        assert result.status_code == 400
        assert result.message == "Validation failed: Status value is not valid."
        assert await TaskRepository(session).count() == 0


class TestReadTasks:
    """GetTaskById and GetAllTasks handlers."""

    async def test_get_all_empty_is_success(self, service):
        result = await service.get_tasks()

        assert result.success is True
        assert result.status_code == 200
        assert result.data == []

    async def test_get_all_newest_first(self, service):
        first = await service.create_task(TaskCreate(title="First", due_date="1404/07/19"))
        second = await service.create_task(TaskCreate(title="Second", due_date="1404/07/20"))

        result = await service.get_tasks()

        assert [dto.id for dto in result.data] == [second.data.id, first.data.id]

    async def test_get_by_id_is_idempotent(self, service):
        created = await service.create_task(TaskCreate(title="Call", due_date="1404/07/19"))

        first = await service.get_task(created.data.id)
        second = await service.get_task(created.data.id)

        assert first.status_code == 200
        assert first.data == second.data

    async def test_get_missing_task(self, service):
        result = await service.get_task(5)

        assert result.status_code == 404
        assert result.message == "Task with id 5 not found or already deleted"


class TestUpdateTask:
    """UpdateTask handler."""

    async def test_overwrites_and_stamps_updated_at(self, service):
        created = await service.create_task(
            TaskCreate(title="Draft", description="first pass", due_date="1404/07/19", priority="High")
        )

        result = await service.update_task(
            created.data.id,
            TaskUpdate(title="Final", due_date="1404/08/01", status="Completed"),
        )

        assert result.status_code == 200
        task = result.data
        assert task.title == "Final"
        assert task.description is None
        assert task.status == "Completed"
        assert task.priority == "Medium"
        assert task.due_date == "1404/08/01"
        assert task.created_at == created.data.created_at
        assert task.updated_at == persian_today()

    async def test_update_missing_task(self, service):
        result = await service.update_task(8, TaskUpdate(title="Ghost", due_date="1404/07/19"))

        assert result.status_code == 404

    async def test_update_validation_failure(self, service):
        created = await service.create_task(TaskCreate(title="Draft", due_date="1404/07/19"))

        result = await service.update_task(created.data.id, TaskUpdate(title="Draft"))

        assert result.status_code == 400
        assert result.message == "Validation failed: Due date is required."


class TestDeleteTask:
    """DeleteTask handler."""

    async def test_soft_delete_hides_task(self, service, session):
        created = await service.create_task(TaskCreate(title="Temp", due_date="1404/07/19"))
        task_id = created.data.id

        result = await service.delete_task(task_id)

        assert result.success is True
        assert result.data == task_id
        assert (await service.get_task(task_id)).status_code == 404
        assert (await service.get_tasks()).data == []
        assert (await service.update_task(task_id, TaskUpdate(title="x", due_date="1404/07/19"))).status_code == 404

        # The row survives with the flag set
        stored = await TaskRepository(session).get_by_id(task_id)
        assert stored is not None
        assert stored.is_deleted is True

    async def test_delete_twice_is_not_found(self, service):
        created = await service.create_task(TaskCreate(title="Temp", due_date="1404/07/19"))

        await service.delete_task(created.data.id)
        result = await service.delete_task(created.data.id)

        assert result.status_code == 404
