"""ORM row for credit applications."""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Enum as SQLEnum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coopcredit.core.enums import CreditApplicationStatus
from coopcredit.db.base import BaseModel, IdType


class CreditApplicationRow(BaseModel):
    """Persistent representation of a CreditApplication."""

    __tablename__ = "credit_applications"

    affiliate_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("affiliates.id"),
        nullable=False,
        index=True,
    )

    # Requested terms
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    term: Mapped[int] = mapped_column(Integer, nullable=False)  # months

    status: Mapped[CreditApplicationStatus] = mapped_column(
        SQLEnum(CreditApplicationStatus, name="credit_application_status"),
        nullable=False,
        index=True,
    )
    submission_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Risk evaluation, null until evaluated
    risk_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    risk_level: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    affiliate: Mapped["AffiliateRow"] = relationship(
        "AffiliateRow",
        back_populates="credit_applications",
    )

    def __repr__(self) -> str:
        return (
            f"<CreditApplicationRow(id={self.id}, affiliate_id={self.affiliate_id}, "
            f"status={self.status.value}, amount={self.amount})>"
        )
