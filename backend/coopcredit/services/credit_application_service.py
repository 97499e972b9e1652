"""Read-side service for credit applications."""

import logging
from typing import List

from coopcredit.core.exceptions import CreditApplicationNotFoundError
from coopcredit.models.domain import CreditApplication
from coopcredit.services.affiliate_service import AffiliateService
from coopcredit.services.ports import CreditApplicationReader

logger = logging.getLogger(__name__)


class CreditApplicationQueryService:
    """Lookups of stored credit applications."""

    def __init__(self, reader: CreditApplicationReader, affiliates: AffiliateService):
        self.reader = reader
        self.affiliates = affiliates

    async def get_by_id(self, application_id: int) -> CreditApplication:
        """
        Retrieve a credit application by ID.

        Raises:
            CreditApplicationNotFoundError: If the application does not exist
        """
        application = await self.reader.find_by_id(application_id)
        if application is None:
            logger.warning(f"Credit application not found with ID: {application_id}")
            raise CreditApplicationNotFoundError(application_id)
        return application

    async def list_by_affiliate_document(self, document: str) -> List[CreditApplication]:
        """
        Retrieve all applications of the affiliate owning a document.

        Returns:
            Applications, newest first

        Raises:
            AffiliateNotFoundError: If no affiliate has this document
        """
        affiliate = await self.affiliates.get_by_document(document)
        applications = await self.reader.find_all_by_affiliate_id(affiliate.id)
        logger.info(
            f"Found {len(applications)} credit applications for affiliate ID: {affiliate.id}"
        )
        return applications
