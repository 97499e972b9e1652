"""SQLAlchemy ORM rows."""

from coopcredit.models.orm.affiliate import AffiliateRow
from coopcredit.models.orm.credit_application import CreditApplicationRow

__all__ = ["AffiliateRow", "CreditApplicationRow"]
