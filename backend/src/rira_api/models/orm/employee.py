"""Employee ORM model."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from rira_api.models.domain.enums import EducationLevel, Gender
from rira_api.models.orm.base import Base, IntEnumType, IntIdMixin


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeORM(Base, IntIdMixin):
    """Employee database model.

    Employees are removed physically on delete; there is no soft-delete flag.
    """

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(60), nullable=False)
    last_name: Mapped[str] = mapped_column(String(60), nullable=False)
    # Enums are persisted by numeric value, not by name
    gender: Mapped[Gender] = mapped_column(
        IntEnumType(Gender),
        nullable=False,
    )
    mobile_number: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    birth_date: Mapped[str | None] = mapped_column(String(10), nullable=True)  # yyyy/MM/dd
    education_level: Mapped[EducationLevel] = mapped_column(
        IntEnumType(EducationLevel),
        nullable=False,
    )
    field_of_study: Mapped[str | None] = mapped_column(String(100), nullable=True)
    position: Mapped[str] = mapped_column(String(80), nullable=False)
    email: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    hire_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (Index("idx_employees_position", "position"),)

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"
