"""Pydantic schemas for credit application endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from coopcredit.core.enums import CreditApplicationStatus
from coopcredit.models.domain import CreditApplication

CREDIT_APPLICATION_STATUS_LABELS = {
    CreditApplicationStatus.PENDING: "Pendiente",
    CreditApplicationStatus.APPROVED: "Aprobado",
    CreditApplicationStatus.REJECTED: "Rechazado",
}


class CreditApplicationCreate(BaseModel):
    """Schema for submitting a credit application."""

    affiliate_id: int = Field(..., gt=0)
    amount: Decimal = Field(
        ..., gt=0, max_digits=15, decimal_places=2, description="Requested amount"
    )
    term: int = Field(..., gt=0, description="Term in months")


class CreditApplicationResponse(BaseModel):
    """Schema for credit application response."""

    id: int
    affiliate_id: int
    amount: Decimal
    term: int
    status: CreditApplicationStatus
    status_label: str
    submission_date: date
    risk_score: Optional[int] = None
    risk_level: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, application: CreditApplication) -> "CreditApplicationResponse":
        return cls(
            id=application.id,
            affiliate_id=application.affiliate_id,
            amount=application.amount,
            term=application.term,
            status=application.status,
            status_label=CREDIT_APPLICATION_STATUS_LABELS[application.status],
            submission_date=application.submission_date,
            risk_score=application.risk_score,
            risk_level=application.risk_level,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
