"""ORM row for affiliates."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Enum as SQLEnum, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coopcredit.core.enums import AffiliateStatus
from coopcredit.db.base import BaseModel


class AffiliateRow(BaseModel):
    """Persistent representation of an Affiliate."""

    __tablename__ = "affiliates"

    document: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    registration_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[AffiliateStatus] = mapped_column(
        SQLEnum(AffiliateStatus, name="affiliate_status"),
        default=AffiliateStatus.ACTIVE,
        nullable=False,
    )

    credit_applications: Mapped[list["CreditApplicationRow"]] = relationship(
        "CreditApplicationRow",
        back_populates="affiliate",
    )

    def __repr__(self) -> str:
        return f"<AffiliateRow(id={self.id}, document={self.document!r}, status={self.status.value})>"
