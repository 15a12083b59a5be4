"""Generic async repository over a single ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rira_api.models.orm.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """CRUD primitives shared by the entity repositories.

    Methods flush but never commit; the calling service owns the transaction.
    """

    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        """Bind the repository to a request-scoped session."""
        self.session = session

    async def get_by_id(self, id: int) -> T | None:
        """Load one row by primary key.

        Args:
            id: Primary key

        Returns:
            The row, or None when no row has this key
        """
        stmt = select(self.model).where(self.model.id == id)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_all(self) -> list[T]:
        """Load every row, highest ID first."""
        stmt = select(self.model).order_by(self.model.id.desc())
        return list((await self.session.execute(stmt)).scalars())

    async def count(self) -> int:
        """Number of rows in the table."""
        stmt = select(func.count()).select_from(self.model)
        return (await self.session.execute(stmt)).scalar_one()

    async def create(self, **kwargs: Any) -> T:
        """Insert a row and return it with its store-assigned ID.

        Args:
            **kwargs: Column values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        return await self.save(instance)

    async def save(self, instance: T) -> T:
        """Flush pending changes and reload the row from the store."""
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: T) -> None:
        """Remove a row physically."""
        await self.session.delete(instance)
        await self.session.flush()
