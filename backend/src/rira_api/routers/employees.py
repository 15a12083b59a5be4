"""Employees router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from rira_api.dependencies import get_employee_service
from rira_api.models.dto.employee import EmployeeCreate, EmployeeDto, EmployeeUpdate
from rira_api.models.dto.response import ResponseEnvelope
from rira_api.security.rate_limit import WRITE_OPERATION_LIMIT, limiter
from rira_api.services.employee_service import EmployeeService

router = APIRouter()


@router.get("/get-all", response_model=ResponseEnvelope[list[EmployeeDto]])
async def get_all_employees(
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> JSONResponse:
    """List all employees, newest first. Responds 404 when none exist."""
    envelope = await service.get_employees()
    return envelope.to_response()


@router.get("/get-by-id/{employee_id}", response_model=ResponseEnvelope[EmployeeDto])
async def get_employee(
    employee_id: int,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> JSONResponse:
    """Get a single employee."""
    envelope = await service.get_employee(employee_id)
    return envelope.to_response()


@router.post("/create", status_code=201, response_model=ResponseEnvelope[int])
@limiter.limit(WRITE_OPERATION_LIMIT)
async def create_employee(
    request: Request,
    body: EmployeeCreate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> JSONResponse:
    """Create an employee and return its ID.

    Email and mobile number must not belong to another employee.
    """
    envelope = await service.create_employee(body)
    return envelope.to_response()


@router.put("/update", response_model=ResponseEnvelope[int])
@limiter.limit(WRITE_OPERATION_LIMIT)
async def update_employee(
    request: Request,
    body: EmployeeUpdate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> JSONResponse:
    """Partially update an employee. Omitted or null fields are left unchanged."""
    envelope = await service.update_employee(body)
    return envelope.to_response()


@router.delete("/delete/{employee_id}", response_model=ResponseEnvelope[int])
@limiter.limit(WRITE_OPERATION_LIMIT)
async def delete_employee(
    request: Request,
    employee_id: int,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> JSONResponse:
    """Permanently delete an employee."""
    envelope = await service.delete_employee(employee_id)
    return envelope.to_response()
