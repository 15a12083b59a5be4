"""Tasks router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from rira_api.dependencies import get_task_service
from rira_api.models.dto.response import ResponseEnvelope
from rira_api.models.dto.task import TaskCreate, TaskDto, TaskUpdate
from rira_api.security.rate_limit import WRITE_OPERATION_LIMIT, limiter
from rira_api.services.task_service import TaskService

router = APIRouter()


@router.get("", response_model=ResponseEnvelope[list[TaskDto]])
async def list_tasks(
    service: Annotated[TaskService, Depends(get_task_service)],
) -> JSONResponse:
    """List tasks that have not been deleted, newest first."""
    envelope = await service.get_tasks()
    return envelope.to_response()


@router.get("/{task_id}", response_model=ResponseEnvelope[TaskDto])
async def get_task(
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> JSONResponse:
    """Get a single task. Deleted tasks respond 404."""
    envelope = await service.get_task(task_id)
    return envelope.to_response()


@router.post("", status_code=201, response_model=ResponseEnvelope[TaskDto])
@limiter.limit(WRITE_OPERATION_LIMIT)
async def create_task(
    request: Request,
    body: TaskCreate,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> JSONResponse:
    """Create a task. Missing creation date defaults to today (Persian calendar)."""
    envelope = await service.create_task(body)
    return envelope.to_response()


@router.put("/{task_id}", response_model=ResponseEnvelope[TaskDto])
@limiter.limit(WRITE_OPERATION_LIMIT)
async def update_task(
    request: Request,
    task_id: int,
    body: TaskUpdate,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> JSONResponse:
    """Overwrite a task's title, description, status, priority and due date."""
    envelope = await service.update_task(task_id, body)
    return envelope.to_response()


@router.delete("/{task_id}", response_model=ResponseEnvelope[int])
@limiter.limit(WRITE_OPERATION_LIMIT)
async def delete_task(
    request: Request,
    task_id: int,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> JSONResponse:
    """Soft-delete a task."""
    envelope = await service.delete_task(task_id)
    return envelope.to_response()
