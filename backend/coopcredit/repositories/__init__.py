from .base import BaseRepository
from .affiliate_repository import AffiliateRepository
from .credit_application_repository import CreditApplicationRepository

__all__ = [
    "BaseRepository",
    "AffiliateRepository",
    "CreditApplicationRepository",
]
