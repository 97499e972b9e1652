"""Pydantic schemas for affiliate endpoints."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from coopcredit.core.enums import AffiliateStatus
from coopcredit.models.domain import Affiliate

AFFILIATE_STATUS_LABELS = {
    AffiliateStatus.ACTIVE: "Activo",
    AffiliateStatus.INACTIVE: "Inactivo",
    AffiliateStatus.SUSPENDED: "Suspendido",
}


class AffiliateCreate(BaseModel):
    """Schema for registering an affiliate."""

    name: str = Field(..., min_length=1, max_length=255)
    document: str = Field(..., min_length=1, max_length=50)
    salary: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    registration_date: date

    @field_validator("name", "document")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("registration_date")
    @classmethod
    def validate_not_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("registration date must be today or in the past")
        return v


class AffiliateSalaryUpdate(BaseModel):
    """Schema for changing an affiliate's salary."""

    salary: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)


class AffiliateResponse(BaseModel):
    """Schema for affiliate response."""

    id: int
    name: str
    document: str
    salary: Decimal
    registration_date: date
    status: AffiliateStatus
    status_label: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, affiliate: Affiliate) -> "AffiliateResponse":
        return cls(
            id=affiliate.id,
            name=affiliate.name,
            document=affiliate.document,
            salary=affiliate.salary,
            registration_date=affiliate.registration_date,
            status=affiliate.status,
            status_label=AFFILIATE_STATUS_LABELS[affiliate.status],
            created_at=affiliate.created_at,
            updated_at=affiliate.updated_at,
        )
