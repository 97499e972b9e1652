from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coopcredit.db.base import BaseModel

# Type variable for the row class
RowType = TypeVar("RowType", bound=BaseModel)


class BaseRepository(Generic[RowType]):
    """
    Generic base repository providing common row operations.

    Subclasses translate between rows and domain entities so that services
    only ever see domain objects.

    Type Parameters:
        RowType: The SQLAlchemy row class this repository manages
    """

    def __init__(self, model: Type[RowType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy row class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def add(self, instance: RowType) -> RowType:
        """
        Insert a row and load its generated columns.

        Args:
            instance: New row

        Returns:
            The row with generated ID
        """
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def get_row(self, id: int) -> Optional[RowType]:
        """
        Retrieve a row by its ID.

        Args:
            id: Numeric ID of the row

        Returns:
            The row if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_one_row_by(self, **filters: Any) -> Optional[RowType]:
        """
        Find a single row matching the given field filters.

        Args:
            **filters: Field equality filters (e.g., document="123")

        Returns:
            The matching row, or None if not found
        """
        stmt = select(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
