"""Employee validation rules for create and partial update commands."""

from collections.abc import Callable

from rira_api.constants.validation import (
    EMPLOYEE_DESCRIPTION_MAX_LENGTH,
    EMPLOYEE_EMAIL_MAX_LENGTH,
    EMPLOYEE_FIELD_OF_STUDY_MAX_LENGTH,
    EMPLOYEE_NAME_MAX_LENGTH,
    EMPLOYEE_POSITION_MAX_LENGTH,
    MOBILE_NUMBER_PATTERN,
    PERSIAN_DATE_PATTERN,
)
from rira_api.exceptions import ValidationError
from rira_api.models.domain.enums import EducationLevel, Gender
from rira_api.models.dto.employee import EmployeeCreate, EmployeeUpdate
from rira_api.utils.validation import (
    exceeds_max_length,
    is_blank,
    is_defined_member,
    is_valid_email,
    matches_pattern,
)


def _required_text(label: str, max_length: int) -> Callable[[str | None], list[str]]:
    def check(value: str | None) -> list[str]:
        if is_blank(value):
            return [f"{label} is required."]
        if exceeds_max_length(value, max_length):
            return [f"{label} must not exceed {max_length} characters."]
        return []

    return check


def _optional_text(label: str, max_length: int) -> Callable[[str | None], list[str]]:
    def check(value: str | None) -> list[str]:
        if is_blank(value):
            return []
        if exceeds_max_length(value, max_length):
            return [f"{label} must not exceed {max_length} characters."]
        return []

    return check


def _check_mobile_number(value: str | None) -> list[str]:
    if is_blank(value):
        return ["Mobile number is required."]
    if not matches_pattern(value, MOBILE_NUMBER_PATTERN):
        return ["Mobile number must contain exactly 11 digits."]
    return []


def _check_email(value: str | None) -> list[str]:
    if is_blank(value):
        return ["Email is required."]
    errors = []
    if not is_valid_email(value):
        errors.append("Email format is not valid.")
    if exceeds_max_length(value, EMPLOYEE_EMAIL_MAX_LENGTH):
        errors.append(f"Email must not exceed {EMPLOYEE_EMAIL_MAX_LENGTH} characters.")
    return errors


def _check_birth_date(value: str | None) -> list[str]:
    if is_blank(value):
        return []
    if not matches_pattern(value, PERSIAN_DATE_PATTERN):
        return ["Birth date must be in yyyy/MM/dd format."]
    return []


def _check_gender(value: int | str | None) -> list[str]:
    if not is_defined_member(Gender, value):
        return ["Gender is not valid."]
    return []


def _check_education_level(value: int | str | None) -> list[str]:
    if not is_defined_member(EducationLevel, value):
        return ["Education level is not valid."]
    return []


# Rule set per field, in the order violations are reported
EMPLOYEE_RULES: dict[str, Callable] = {
    "first_name": _required_text("First name", EMPLOYEE_NAME_MAX_LENGTH),
    "last_name": _required_text("Last name", EMPLOYEE_NAME_MAX_LENGTH),
    "gender": _check_gender,
    "mobile_number": _check_mobile_number,
    "birth_date": _check_birth_date,
    "education_level": _check_education_level,
    "field_of_study": _optional_text("Field of study", EMPLOYEE_FIELD_OF_STUDY_MAX_LENGTH),
    "position": _required_text("Position", EMPLOYEE_POSITION_MAX_LENGTH),
    "email": _check_email,
    "description": _optional_text("Description", EMPLOYEE_DESCRIPTION_MAX_LENGTH),
}


def collect_employee_errors(data: EmployeeCreate | EmployeeUpdate, partial: bool = False) -> list[str]:
    """Run the employee rule set and collect every violation.

    Args:
        data: Create or update command
        partial: Skip fields that are None instead of treating them as missing

    Returns:
        Violation messages in rule order
    """
    errors: list[str] = []
    for field, rule in EMPLOYEE_RULES.items():
        value = getattr(data, field)
        if partial and value is None:
            continue
        errors.extend(rule(value))
    return errors


def validate_employee_create(data: EmployeeCreate) -> None:
    """Validate a create command.

    Raises:
        ValidationError: With every violated rule
    """
    errors = collect_employee_errors(data)
    if errors:
        raise ValidationError(errors)


def validate_employee_update(data: EmployeeUpdate) -> None:
    """Validate a partial update command; absent fields are skipped.

    Raises:
        ValidationError: With every violated rule
    """
    errors = collect_employee_errors(data, partial=True)
    if errors:
        raise ValidationError(errors)
