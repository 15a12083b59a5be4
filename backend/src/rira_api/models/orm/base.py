"""SQLAlchemy declarative base, shared mixins and column types."""

from enum import IntEnum
from typing import Any

from sqlalchemy import Integer
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class IntIdMixin:
    """Store-assigned integer primary key."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class IntEnumType(TypeDecorator):
    """Persist an IntEnum by its numeric value."""

    impl = Integer
    cache_ok = True

    def __init__(self, enum_type: type[IntEnum], *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enum_type = enum_type

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return int(self.enum_type(value))

    def process_result_value(self, value: Any, dialect: Dialect) -> IntEnum | None:
        if value is None:
            return None
        return self.enum_type(value)
