"""Field-level validation predicates shared by the entity validators."""

import re
from enum import IntEnum

from email_validator import EmailNotValidError, validate_email

from rira_api.models.domain.enums import parse_enum


def is_blank(value: str | None) -> bool:
    """Check whether a value is absent, empty or whitespace only.

    Args:
        value: Raw string value

    Returns:
        True if there is nothing to validate
    """
    return value is None or not str(value).strip()


def exceeds_max_length(value: str | None, max_length: int) -> bool:
    """Check whether a string is longer than allowed.

    Args:
        value: Raw string value
        max_length: Maximum allowed length

    Returns:
        True if the value is too long
    """
    return value is not None and len(value) > max_length


def matches_pattern(value: str, pattern: re.Pattern[str]) -> bool:
    """Check a value against a compiled format pattern."""
    return pattern.match(value) is not None


def is_valid_email(value: str) -> bool:
    """Check email address syntax without DNS lookups.

    Internal domains such as ``rira.local`` are accepted.

    Args:
        value: Email address to check

    Returns:
        True if the address is well formed
    """
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def is_defined_member(enum_type: type[IntEnum], value: int | str | None) -> bool:
    """Check that a value names a defined enum member (0 never does)."""
    return parse_enum(enum_type, value) is not None
