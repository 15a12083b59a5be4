"""Canonical enums shared by the ORM, DTO and mapping layers."""

import re
from enum import IntEnum
from typing import TypeVar

E = TypeVar("E", bound=IntEnum)

_NUMERIC = re.compile(r"-?\d+")


class Gender(IntEnum):
    """Employee gender."""

    MALE = 1
    FEMALE = 2
    OTHER = 3


class EducationLevel(IntEnum):
    """Highest education level of an employee."""

    DIPLOMA = 1
    ASSOCIATE = 2
    BACHELOR = 3
    MASTER = 4
    DOCTORATE = 5
    OTHER = 6


class TaskStatus(IntEnum):
    """Task workflow status."""

    PENDING = 1
    IN_PROGRESS = 2
    COMPLETED = 3
    CANCELLED = 4


class TaskPriority(IntEnum):
    """Task priority."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


def display_name(member: IntEnum) -> str:
    """Return the wire name of an enum member, e.g. ``InProgress``."""
    return "".join(part.capitalize() for part in member.name.split("_"))


def _normalize(name: str) -> str:
    return name.replace("_", "").replace(" ", "").lower()


def parse_enum(enum_type: type[E], value: int | str | IntEnum | None) -> E | None:
    """Parse a member by numeric value or case-insensitive name.

    Accepts ``2``, ``"2"``, ``"InProgress"``, ``"in_progress"`` and
    ``"INPROGRESS"`` alike. Returns None when the value is blank or does not
    name a defined member; 0 is never a member.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, enum_type):
        return value
    if isinstance(value, int):
        try:
            return enum_type(value)
        except ValueError:
            return None

    text = str(value).strip()
    if not text:
        return None
    if _NUMERIC.fullmatch(text):
        return parse_enum(enum_type, int(text))

    wanted = _normalize(text)
    for member in enum_type:
        if _normalize(member.name) == wanted:
            return member
    return None
