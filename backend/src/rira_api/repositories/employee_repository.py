"""Employee repository."""

from sqlalchemy import or_, select

from rira_api.models.orm.employee import EmployeeORM
from rira_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def get_by_email(self, email: str) -> EmployeeORM | None:
        """Get employee by email.

        Args:
            email: Employee email address

        Returns:
            EmployeeORM or None if not found
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.email == email)
        )
        return result.scalar_one_or_none()

    async def exists_by_email_or_mobile(self, email: str | None, mobile_number: str | None) -> bool:
        """Check whether any employee already uses the email or mobile number.

        Args:
            email: Email address to look for
            mobile_number: Mobile number to look for

        Returns:
            True if a matching employee exists
        """
        result = await self.session.execute(
            select(EmployeeORM.id)
            .where(
                or_(
                    EmployeeORM.email == email,
                    EmployeeORM.mobile_number == mobile_number,
                )
            )
            .limit(1)
        )
        return result.first() is not None
