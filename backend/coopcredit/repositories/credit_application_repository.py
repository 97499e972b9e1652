"""Repository for credit application data access."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coopcredit.models.domain import CreditApplication
from coopcredit.models.orm import CreditApplicationRow
from coopcredit.repositories.base import BaseRepository


class CreditApplicationRepository(BaseRepository[CreditApplicationRow]):
    """
    Repository for CreditApplication entities.

    Implements the CreditApplicationReader and CreditApplicationWriter ports.
    Applications are written once, after their decision is final.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the credit application repository.

        Args:
            db: Async database session
        """
        super().__init__(CreditApplicationRow, db)

    async def find_by_id(self, id: int) -> Optional[CreditApplication]:
        row = await self.get_row(id)
        return self.to_domain(row) if row else None

    async def find_all_by_affiliate_id(self, affiliate_id: int) -> List[CreditApplication]:
        """
        Retrieve all applications of an affiliate, newest first.

        Args:
            affiliate_id: ID of the affiliate

        Returns:
            List of applications
        """
        stmt = (
            select(CreditApplicationRow)
            .where(CreditApplicationRow.affiliate_id == affiliate_id)
            .order_by(CreditApplicationRow.created_at.desc(), CreditApplicationRow.id.desc())
        )
        result = await self.db.execute(stmt)
        return [self.to_domain(row) for row in result.scalars().all()]

    async def save(self, application: CreditApplication) -> CreditApplication:
        """
        Insert a credit application.

        Args:
            application: Decided application without identity

        Returns:
            The stored application with its generated ID

        Raises:
            ValueError: If the application already has an identity
        """
        if application.id is not None:
            raise ValueError(
                f"Credit application {application.id} is already stored; "
                "decided applications are immutable"
            )

        row = await self.add(
            CreditApplicationRow(
                affiliate_id=application.affiliate_id,
                amount=application.amount,
                term=application.term,
                status=application.status,
                submission_date=application.submission_date,
                risk_score=application.risk_score,
                risk_level=application.risk_level,
                created_at=application.created_at,
                updated_at=application.updated_at,
            )
        )
        return self.to_domain(row)

    @staticmethod
    def to_domain(row: CreditApplicationRow) -> CreditApplication:
        return CreditApplication.reconstruct(
            id=row.id,
            affiliate_id=row.affiliate_id,
            amount=row.amount,
            term=row.term,
            status=row.status,
            submission_date=row.submission_date,
            risk_score=row.risk_score,
            risk_level=row.risk_level,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
