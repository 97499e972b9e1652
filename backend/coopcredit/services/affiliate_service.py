"""Affiliate service for registration and membership management."""

import logging
from datetime import date
from decimal import Decimal

from coopcredit.core.exceptions import AffiliateNotFoundError, DuplicateAffiliateError
from coopcredit.models.domain import Affiliate
from coopcredit.services.ports import AffiliateReader, AffiliateWriter, RiskEvaluator
from coopcredit.services.risk_checks import AdvisoryRiskCheck

logger = logging.getLogger(__name__)

# Term used for the informational risk check at registration
DEFAULT_REGISTRATION_TERM_MONTHS = 12


class AffiliateService:
    """
    Affiliate service for managing cooperative members.

    Registration runs an advisory risk evaluation against the risk service;
    its outcome is logged and never blocks the registration.
    """

    def __init__(
        self,
        reader: AffiliateReader,
        writer: AffiliateWriter,
        risk_evaluator: RiskEvaluator,
    ):
        """
        Initialize the affiliate service.

        Args:
            reader: Affiliate lookups
            writer: Affiliate persistence
            risk_evaluator: External risk service
        """
        self.reader = reader
        self.writer = writer
        self.risk_check = AdvisoryRiskCheck(risk_evaluator)

    async def register(
        self,
        name: str,
        document: str,
        salary: Decimal,
        registration_date: date,
    ) -> Affiliate:
        """
        Register a new affiliate.

        Args:
            name: Full name
            document: National identity document (unique)
            salary: Monthly salary
            registration_date: Date the member joined

        Returns:
            The stored affiliate

        Raises:
            DuplicateAffiliateError: If the document is already registered
            ValidationError: If any field is invalid
        """
        if await self.reader.find_by_document(document) is not None:
            raise DuplicateAffiliateError(document)

        affiliate = Affiliate.create(name, salary, registration_date, document)
        saved = await self.writer.save(affiliate)
        logger.info(f"Registered affiliate {saved.id} with document {saved.document}")

        await self.risk_check.evaluate(
            saved.document, saved.salary, DEFAULT_REGISTRATION_TERM_MONTHS
        )
        return saved

    async def get_by_id(self, affiliate_id: int) -> Affiliate:
        """
        Retrieve an affiliate by ID.

        Raises:
            AffiliateNotFoundError: If no affiliate has this ID
        """
        affiliate = await self.reader.find_by_id(affiliate_id)
        if affiliate is None:
            raise AffiliateNotFoundError(f"Affiliate with ID {affiliate_id} not found")
        return affiliate

    async def get_by_document(self, document: str) -> Affiliate:
        """
        Retrieve an affiliate by document.

        Raises:
            AffiliateNotFoundError: If no affiliate has this document
        """
        affiliate = await self.reader.find_by_document(document)
        if affiliate is None:
            raise AffiliateNotFoundError("Affiliate not found")
        return affiliate

    async def deactivate(self, affiliate_id: int) -> Affiliate:
        affiliate = await self.get_by_id(affiliate_id)
        affiliate.deactivate()
        logger.info(f"Deactivated affiliate {affiliate_id}")
        return await self.writer.save(affiliate)

    async def reactivate(self, affiliate_id: int) -> Affiliate:
        affiliate = await self.get_by_id(affiliate_id)
        affiliate.reactivate()
        logger.info(f"Reactivated affiliate {affiliate_id}")
        return await self.writer.save(affiliate)

    async def update_salary(self, affiliate_id: int, salary: Decimal) -> Affiliate:
        """
        Change an affiliate's salary.

        Raises:
            AffiliateNotFoundError: If no affiliate has this ID
            ValidationError: If the salary is not positive
        """
        affiliate = await self.get_by_id(affiliate_id)
        affiliate.update_salary(salary)
        return await self.writer.save(affiliate)
