"""Tests for EmployeeService handlers."""

import pytest
from sqlalchemy.exc import OperationalError

from rira_api.models.domain import EducationLevel, Gender
from rira_api.models.dto.employee import EmployeeCreate, EmployeeUpdate
from rira_api.repositories import EmployeeRepository
from rira_api.services import EmployeeService


def _create_command(**overrides) -> EmployeeCreate:
    fields = {
        "first_name": "Soroush",
        "last_name": "Maghrebi",
        "gender": "Male",
        "mobile_number": "09120000000",
        "birth_date": "1370/05/21",
        "education_level": "Doctorate",
        "field_of_study": "Software Engineering",
        "position": "Lead Developer",
        "email": "parkand@github.com",
    }
    fields.update(overrides)
    return EmployeeCreate(**fields)


@pytest.fixture
def service(session) -> EmployeeService:
    return EmployeeService(session)


class TestCreateEmployee:
    """CreateEmployee handler."""

    async def test_creates_and_returns_id(self, service, session):
        result = await service.create_employee(_create_command())

        assert result.success is True
        assert result.status_code == 201
        assert isinstance(result.data, int)

        stored = await EmployeeRepository(session).get_by_email("parkand@github.com")
        assert stored is not None
        assert stored.id == result.data
        assert stored.gender is Gender.MALE
        assert stored.education_level is EducationLevel.DOCTORATE
        assert stored.is_active is True
        assert stored.hire_date is not None

    async def test_validation_failure_aggregates_messages(self, service, session):
        result = await service.create_employee(EmployeeCreate(first_name="Ali"))

        assert result.success is False
        assert result.status_code == 400
        assert result.data is None
        assert result.message == (
            "Validation failed: Last name is required.; Gender is not valid.; "
            "Mobile number is required.; Education level is not valid.; "
            "Position is required.; Email is required."
        )
        assert await EmployeeRepository(session).count() == 0

    @pytest.mark.parametrize("gender", ["--1", "²"])
    async def test_malformed_numeric_gender_is_rejected(self, service, session, gender):
        result = await service.create_employee(_create_command(gender=gender))

        assert result.status_code == 400
        assert result.message == "Validation failed: Gender is not valid."
        assert await EmployeeRepository(session).count() == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"mobile_number": "09129999999"},
            {"email": "other@example.com"},
        ],
    )
    async def test_duplicate_email_or_mobile_is_rejected(self, service, session, overrides):
        await service.create_employee(_create_command())

        result = await service.create_employee(_create_command(**overrides))

        assert result.success is False
        assert result.status_code == 409
        assert result.message == "Email or mobile number is already registered"
        assert await EmployeeRepository(session).count() == 1


class TestReadEmployees:
    """GetEmployeeById and GetAllEmployees handlers."""

    async def test_get_by_id_is_idempotent(self, service):
        created = await service.create_employee(_create_command())

        first = await service.get_employee(created.data)
        second = await service.get_employee(created.data)

        assert first.status_code == 200
        assert first.data == second.data
        assert first.data.full_name == "Soroush Maghrebi"
        assert first.data.gender == "Male"
        assert first.data.education_level == "Doctorate"

    async def test_get_missing_employee(self, service):
        result = await service.get_employee(404)

        assert result.success is False
        assert result.status_code == 404
        assert result.message == "Employee with id 404 not found"

    async def test_get_all_empty_is_not_found(self, service):
        result = await service.get_employees()

        assert result.success is False
        assert result.status_code == 404

    async def test_get_all_newest_first(self, service):
        first = await service.create_employee(_create_command())
        second = await service.create_employee(
            _create_command(mobile_number="09121234567", email="ali.kazemi@rira.local")
        )

        result = await service.get_employees()

        assert result.status_code == 200
        assert [dto.id for dto in result.data] == [second.data, first.data]


class TestUpdateEmployee:
    """UpdateEmployee handler."""

    async def test_partial_update_preserves_other_fields(self, service):
        created = await service.create_employee(_create_command())
        before = (await service.get_employee(created.data)).data

        result = await service.update_employee(EmployeeUpdate(id=created.data, first_name="Sorena"))

        assert result.success is True
        assert result.status_code == 200
        assert result.data == created.data

        after = (await service.get_employee(created.data)).data
        assert after.first_name == "Sorena"
        assert after.full_name == "Sorena Maghrebi"
        unchanged = before.model_dump(exclude={"first_name", "full_name"})
        assert after.model_dump(exclude={"first_name", "full_name"}) == unchanged

    async def test_update_enum_by_name(self, service):
        created = await service.create_employee(_create_command())

        await service.update_employee(EmployeeUpdate(id=created.data, education_level="master", is_active=False))

        after = (await service.get_employee(created.data)).data
        assert after.education_level == "Master"
        assert after.is_active is False

    async def test_update_missing_employee(self, service):
        result = await service.update_employee(EmployeeUpdate(id=99, first_name="Nobody"))

        assert result.status_code == 404
        assert result.message == "Employee with id 99 not found"

    async def test_update_with_zero_id_is_not_found(self, service):
        result = await service.update_employee(EmployeeUpdate(id=0, first_name="Nobody"))

        assert result.status_code == 404
        assert result.message == "Employee with id 0 not found"

    async def test_blank_optional_text_is_stored_as_null(self, service, session):
        created = await service.create_employee(_create_command())

        await service.update_employee(
            EmployeeUpdate(id=created.data, birth_date="", field_of_study="  ", description="")
        )

        stored = await EmployeeRepository(session).get_by_id(created.data)
        assert stored.birth_date is None
        assert stored.field_of_study is None
        assert stored.description is None

    async def test_update_validation_failure_changes_nothing(self, service):
        created = await service.create_employee(_create_command())

        result = await service.update_employee(
            EmployeeUpdate(id=created.data, first_name="Sorena", mobile_number="12")
        )

        assert result.status_code == 400
        assert result.message == "Validation failed: Mobile number must contain exactly 11 digits."
        after = (await service.get_employee(created.data)).data
        assert after.first_name == "Soroush"

    async def test_update_to_taken_email_is_conflict(self, service):
        await service.create_employee(_create_command())
        other = await service.create_employee(
            _create_command(mobile_number="09121234567", email="ali.kazemi@rira.local")
        )

        result = await service.update_employee(EmployeeUpdate(id=other.data, email="parkand@github.com"))

        assert result.success is False
        assert result.status_code == 409
        after = (await service.get_employee(other.data)).data
        assert after.email == "ali.kazemi@rira.local"


class TestDeleteEmployee:
    """DeleteEmployee handler."""

    async def test_delete_removes_record(self, service, session):
        created = await service.create_employee(_create_command())

        result = await service.delete_employee(created.data)

        assert result.success is True
        assert result.data == created.data
        assert await EmployeeRepository(session).get_by_id(created.data) is None
        assert (await service.get_employee(created.data)).status_code == 404

    async def test_delete_missing_employee(self, service):
        result = await service.delete_employee(12)

        assert result.status_code == 404


class TestPersistenceFailures:
    """Store errors are returned as envelopes, not raised."""

    async def test_store_error_becomes_500_envelope(self, service, monkeypatch):
        async def broken_get_all():
            raise OperationalError("SELECT employees", {}, Exception("database is locked"))

        monkeypatch.setattr(service.employee_repo, "get_all", broken_get_all)

        result = await service.get_employees()

        assert result.success is False
        assert result.status_code == 500
        assert result.message.startswith("Failed to load employees: ")
        assert "database is locked" in result.message
