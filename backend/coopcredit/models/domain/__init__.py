"""Domain entities and value objects."""

from coopcredit.models.domain.affiliate import Affiliate
from coopcredit.models.domain.credit_application import CreditApplication
from coopcredit.models.domain.risk_evaluation import RiskEvaluation

__all__ = [
    "Affiliate",
    "CreditApplication",
    "RiskEvaluation",
]
