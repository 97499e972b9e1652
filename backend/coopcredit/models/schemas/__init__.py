"""Pydantic schemas for API validation and serialization."""

from coopcredit.models.schemas.affiliate import (
    AffiliateCreate,
    AffiliateResponse,
    AffiliateSalaryUpdate,
)
from coopcredit.models.schemas.credit_application import (
    CreditApplicationCreate,
    CreditApplicationResponse,
)
from coopcredit.models.schemas.problem import ProblemDetail

__all__ = [
    # Affiliate schemas
    "AffiliateCreate",
    "AffiliateSalaryUpdate",
    "AffiliateResponse",
    # Credit application schemas
    "CreditApplicationCreate",
    "CreditApplicationResponse",
    # Errors
    "ProblemDetail",
]
