"""
Collaborator contracts consumed by the services.

Repositories and the risk-central client implement these protocols; the
services depend only on them, never on SQLAlchemy or httpx directly.
"""

from decimal import Decimal
from typing import List, Optional, Protocol, runtime_checkable

from coopcredit.models.domain import Affiliate, CreditApplication, RiskEvaluation


@runtime_checkable
class AffiliateReader(Protocol):
    """Read access to affiliates."""

    async def find_by_id(self, id: int) -> Optional[Affiliate]:
        ...

    async def find_by_document(self, document: str) -> Optional[Affiliate]:
        ...


@runtime_checkable
class AffiliateWriter(Protocol):
    """Write access to affiliates."""

    async def save(self, affiliate: Affiliate) -> Affiliate:
        """
        Insert a new affiliate or update an existing one.

        Returns:
            The stored affiliate with its identity assigned
        """
        ...


@runtime_checkable
class CreditApplicationReader(Protocol):
    """Read access to credit applications."""

    async def find_by_id(self, id: int) -> Optional[CreditApplication]:
        ...

    async def find_all_by_affiliate_id(self, affiliate_id: int) -> List[CreditApplication]:
        ...


@runtime_checkable
class CreditApplicationWriter(Protocol):
    """Write access to credit applications."""

    async def save(self, application: CreditApplication) -> CreditApplication:
        """
        Persist an application.

        Returns:
            The stored application with its identity assigned
        """
        ...


@runtime_checkable
class RiskEvaluator(Protocol):
    """External risk-scoring service."""

    async def evaluate_risk(
        self, document: str, amount: Decimal, term_months: int
    ) -> RiskEvaluation:
        """
        Evaluate credit risk for a document, amount and term.

        Raises:
            ExternalServiceError: If the call fails, times out or returns
                a malformed payload
        """
        ...
