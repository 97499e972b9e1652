"""Repository for affiliate data access."""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coopcredit.core.exceptions import DuplicateAffiliateError
from coopcredit.models.domain import Affiliate
from coopcredit.models.orm import AffiliateRow
from coopcredit.repositories.base import BaseRepository


class AffiliateRepository(BaseRepository[AffiliateRow]):
    """
    Repository for Affiliate entities.

    Implements the AffiliateReader and AffiliateWriter ports.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the affiliate repository.

        Args:
            db: Async database session
        """
        super().__init__(AffiliateRow, db)

    async def find_by_id(self, id: int) -> Optional[Affiliate]:
        row = await self.get_row(id)
        return self.to_domain(row) if row else None

    async def find_by_document(self, document: str) -> Optional[Affiliate]:
        row = await self.find_one_row_by(document=document)
        return self.to_domain(row) if row else None

    async def save(self, affiliate: Affiliate) -> Affiliate:
        """
        Insert a new affiliate or update the stored one.

        The document is never rewritten on update.

        Args:
            affiliate: Domain affiliate

        Returns:
            The stored affiliate rebuilt from its row

        Raises:
            DuplicateAffiliateError: If the document is already stored
        """
        if affiliate.id is None:
            try:
                row = await self.add(
                    AffiliateRow(
                        document=affiliate.document,
                        name=affiliate.name,
                        salary=affiliate.salary,
                        registration_date=affiliate.registration_date,
                        status=affiliate.status,
                        created_at=affiliate.created_at,
                        updated_at=affiliate.updated_at,
                    )
                )
            except IntegrityError as e:
                # Unique document index
                raise DuplicateAffiliateError(affiliate.document) from e
            return self.to_domain(row)

        row = await self.get_row(affiliate.id)
        if row is None:
            raise ValueError(f"Affiliate with ID {affiliate.id} does not exist")

        row.name = affiliate.name
        row.salary = affiliate.salary
        row.registration_date = affiliate.registration_date
        row.status = affiliate.status
        row.updated_at = affiliate.updated_at
        await self.db.flush()
        await self.db.refresh(row)
        return self.to_domain(row)

    @staticmethod
    def to_domain(row: AffiliateRow) -> Affiliate:
        return Affiliate.reconstruct(
            id=row.id,
            name=row.name,
            salary=row.salary,
            registration_date=row.registration_date,
            status=row.status,
            created_at=row.created_at,
            updated_at=row.updated_at,
            document=row.document,
        )
