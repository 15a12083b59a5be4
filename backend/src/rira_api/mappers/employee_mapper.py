"""Employee record <-> DTO mapping.

Pure functions: they never touch the store and only mutate the record they
are explicitly given.
"""

from datetime import datetime, timezone
from typing import Any

from rira_api.models.domain.enums import EducationLevel, Gender, display_name, parse_enum
from rira_api.models.dto.employee import EmployeeCreate, EmployeeDto, EmployeeUpdate
from rira_api.models.orm.employee import EmployeeORM

# Fields a partial update may overwrite, in DTO attribute names
UPDATABLE_FIELDS = (
    "first_name",
    "last_name",
    "gender",
    "mobile_number",
    "birth_date",
    "education_level",
    "field_of_study",
    "position",
    "email",
    "hire_date",
    "is_active",
    "description",
)

# Optional text fields stored as NULL when blank
OPTIONAL_TEXT_FIELDS = ("birth_date", "field_of_study", "description")


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def employee_to_dto(employee: EmployeeORM) -> EmployeeDto:
    """Build an EmployeeDto from an ORM record."""
    return EmployeeDto(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        full_name=employee.full_name,
        gender=display_name(employee.gender),
        mobile_number=employee.mobile_number,
        birth_date=employee.birth_date,
        education_level=display_name(employee.education_level),
        field_of_study=employee.field_of_study,
        position=employee.position,
        email=employee.email,
        hire_date=employee.hire_date,
        is_active=employee.is_active,
        description=employee.description,
    )


def employee_fields_from_create(data: EmployeeCreate) -> dict[str, Any]:
    """Map a validated create command to ORM column values.

    ``hire_date`` defaults to the current time when not supplied.
    """
    return {
        "first_name": data.first_name,
        "last_name": data.last_name,
        "gender": parse_enum(Gender, data.gender),
        "mobile_number": data.mobile_number,
        "birth_date": _blank_to_none(data.birth_date),
        "education_level": parse_enum(EducationLevel, data.education_level),
        "field_of_study": _blank_to_none(data.field_of_study),
        "position": data.position,
        "email": data.email,
        "hire_date": data.hire_date or datetime.now(timezone.utc),
        "is_active": data.is_active,
        "description": _blank_to_none(data.description),
    }


def employee_changes_from_update(data: EmployeeUpdate) -> dict[str, Any]:
    """Collect the fields an update command actually sets.

    Fields left as None are omitted so the stored values survive. Blank
    optional text clears the stored value.
    """
    changes: dict[str, Any] = {}
    for field in UPDATABLE_FIELDS:
        value = getattr(data, field)
        if value is None:
            continue
        if field == "gender":
            value = parse_enum(Gender, value)
        elif field == "education_level":
            value = parse_enum(EducationLevel, value)
        elif field in OPTIONAL_TEXT_FIELDS:
            value = _blank_to_none(value)
        changes[field] = value
    return changes


def apply_employee_changes(employee: EmployeeORM, changes: dict[str, Any]) -> EmployeeORM:
    """Merge collected changes onto an existing record."""
    for key, value in changes.items():
        setattr(employee, key, value)
    return employee
