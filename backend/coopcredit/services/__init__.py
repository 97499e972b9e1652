"""Service layer for business logic."""

from coopcredit.services.affiliate_service import AffiliateService
from coopcredit.services.approval_policy import ApprovalPolicy
from coopcredit.services.credit_application_service import CreditApplicationQueryService
from coopcredit.services.credit_application_workflow import CreditApplicationWorkflow

__all__ = [
    "AffiliateService",
    "ApprovalPolicy",
    "CreditApplicationQueryService",
    "CreditApplicationWorkflow",
]
