"""Employee DTOs."""

from datetime import datetime

from pydantic import Field

from rira_api.models.dto.base import ApiModel


class EmployeeDto(ApiModel):
    """Employee response DTO. Enums are rendered by member name."""

    id: int
    first_name: str
    last_name: str
    full_name: str
    gender: str
    mobile_number: str
    birth_date: str | None = None
    education_level: str
    field_of_study: str | None = None
    position: str
    email: str
    hire_date: datetime
    is_active: bool = True
    description: str | None = None


class EmployeeCreate(ApiModel):
    """Command for creating an employee.

    Every field is optional at the schema level so that the validator can
    report all missing or malformed fields in one response.
    """

    first_name: str | None = None
    last_name: str | None = None
    gender: int | str | None = Field(default=None, description="Numeric value or member name")
    mobile_number: str | None = None
    birth_date: str | None = Field(default=None, description="Persian date, yyyy/MM/dd")
    education_level: int | str | None = Field(default=None, description="Numeric value or member name")
    field_of_study: str | None = None
    position: str | None = None
    email: str | None = None
    hire_date: datetime | None = None
    is_active: bool = True
    description: str | None = None


class EmployeeUpdate(ApiModel):
    """Command for a partial employee update.

    A field left out (None) is neither validated nor changed. An empty string
    is a value and must satisfy the field's rules.
    """

    id: int
    first_name: str | None = None
    last_name: str | None = None
    gender: int | str | None = None
    mobile_number: str | None = None
    birth_date: str | None = None
    education_level: int | str | None = None
    field_of_study: str | None = None
    position: str | None = None
    email: str | None = None
    hire_date: datetime | None = None
    is_active: bool | None = None
    description: str | None = None
