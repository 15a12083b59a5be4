"""Employee command and query handlers."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from rira_api.exceptions import DuplicateEmployeeError, EmployeeNotFoundError, ValidationError
from rira_api.mappers.employee_mapper import (
    apply_employee_changes,
    employee_changes_from_update,
    employee_fields_from_create,
    employee_to_dto,
)
from rira_api.models.dto.employee import EmployeeCreate, EmployeeDto, EmployeeUpdate
from rira_api.models.dto.response import (
    ResponseEnvelope,
    bad_request,
    conflict,
    created,
    not_found,
    ok,
)
from rira_api.repositories.employee_repository import EmployeeRepository
from rira_api.services.boundary import handler_boundary
from rira_api.validators.employee_validator import (
    validate_employee_create,
    validate_employee_update,
)

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = DuplicateEmployeeError().message


class EmployeeService:
    """Service for employee CRUD operations.

    Employees are hard-deleted. Email and mobile number uniqueness is checked
    before insert and enforced again by the store's unique constraints.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)

    @handler_boundary("create employee", conflict_message=DUPLICATE_MESSAGE)
    async def create_employee(self, data: EmployeeCreate) -> ResponseEnvelope[int]:
        """Create an employee.

        Args:
            data: Employee creation command

        Returns:
            Envelope with the new employee ID (201), or a 400/409/500 failure
        """
        try:
            validate_employee_create(data)
        except ValidationError as e:
            logger.info(f"Employee create rejected by validation: {len(e.errors)} error(s)")
            return bad_request(e.message)

        if await self.employee_repo.exists_by_email_or_mobile(data.email, data.mobile_number):
            logger.info("Employee create rejected: duplicate email or mobile number")
            return conflict(DUPLICATE_MESSAGE)

        employee = await self.employee_repo.create(**employee_fields_from_create(data))
        await self.session.commit()

        logger.info(f"Created employee {employee.id}")
        return created(employee.id, "Employee created successfully")

    @handler_boundary("update employee", conflict_message=DUPLICATE_MESSAGE)
    async def update_employee(self, data: EmployeeUpdate) -> ResponseEnvelope[int]:
        """Partially update an employee.

        Only fields present in the command are validated and written.

        Args:
            data: Employee update command

        Returns:
            Envelope with the employee ID, or a 400/404/409/500 failure
        """
        employee = await self.employee_repo.get_by_id(data.id)
        if employee is None:
            return not_found(EmployeeNotFoundError(data.id).message)

        try:
            validate_employee_update(data)
        except ValidationError as e:
            logger.info(f"Employee {data.id} update rejected by validation")
            return bad_request(e.message)

        changes = employee_changes_from_update(data)
        if changes:
            apply_employee_changes(employee, changes)
            await self.employee_repo.save(employee)
            await self.session.commit()

        changed = ", ".join(sorted(changes)) or "no changes"
        logger.info(f"Updated employee {employee.id} ({changed})")
        return ok(employee.id, f"Employee {employee.id} updated successfully")

    @handler_boundary("delete employee")
    async def delete_employee(self, employee_id: int) -> ResponseEnvelope[int]:
        """Physically remove an employee.

        Args:
            employee_id: Employee ID

        Returns:
            Envelope with the removed employee ID, or a 404/500 failure
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            return not_found(EmployeeNotFoundError(employee_id).message)

        await self.employee_repo.delete(employee)
        await self.session.commit()

        logger.info(f"Deleted employee {employee_id}")
        return ok(employee_id, "Employee deleted successfully")

    @handler_boundary("load employee")
    async def get_employee(self, employee_id: int) -> ResponseEnvelope[EmployeeDto]:
        """Get a single employee.

        Args:
            employee_id: Employee ID

        Returns:
            Envelope with the employee DTO, or a 404/500 failure
        """
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            return not_found(EmployeeNotFoundError(employee_id).message)
        return ok(employee_to_dto(employee), "Employee retrieved successfully")

    @handler_boundary("load employees")
    async def get_employees(self) -> ResponseEnvelope[list[EmployeeDto]]:
        """Get all employees, newest first.

        An empty store is reported as 404, unlike the task list.

        Returns:
            Envelope with the employee DTOs, or a 404/500 failure
        """
        employees = await self.employee_repo.get_all()
        if not employees:
            return not_found("No employees are registered")
        return ok(
            [employee_to_dto(employee) for employee in employees],
            "Employees retrieved successfully",
        )
