"""Credit application domain entity and its decision state machine."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from coopcredit.core.enums import CreditApplicationStatus
from coopcredit.core.exceptions import StateError, ValidationError
from coopcredit.models.domain.validation import (
    require_non_negative_int,
    require_positive_decimal,
    require_positive_int,
    require_text,
)


class CreditApplication:
    """
    A request for a loan amount over a term, subject to risk-based approval.

    Status moves one way only: PENDING -> APPROVED or PENDING -> REJECTED.
    Once decided the application is terminal.
    """

    def __init__(
        self,
        affiliate_id: int,
        amount: Decimal,
        term: int,
        status: CreditApplicationStatus,
        submission_date: date,
        created_at: datetime,
        updated_at: datetime,
        risk_score: Optional[int] = None,
        risk_level: Optional[str] = None,
        id: Optional[int] = None,
    ):
        self._affiliate_id = require_positive_int(affiliate_id, "affiliate_id")
        self._amount = require_positive_decimal(amount, "amount")
        self._term = require_positive_int(term, "term")
        if not isinstance(status, CreditApplicationStatus):
            raise ValidationError(
                "status must be a CreditApplicationStatus", field="status"
            )
        self._status = status
        self._submission_date = submission_date
        self._risk_score = (
            require_non_negative_int(risk_score, "risk_score")
            if risk_score is not None
            else None
        )
        self._risk_level = (
            require_text(risk_level, "risk_level") if risk_level is not None else None
        )
        self._created_at = created_at
        self._updated_at = updated_at
        self._id = id

    @classmethod
    def create(cls, affiliate_id: int, amount: Decimal, term: int) -> "CreditApplication":
        """
        Create a pending application submitted today.

        Raises:
            ValidationError: If affiliate_id, amount or term is not positive
        """
        now = datetime.now()
        return cls(
            affiliate_id=affiliate_id,
            amount=amount,
            term=term,
            status=CreditApplicationStatus.PENDING,
            submission_date=now.date(),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: int,
        affiliate_id: int,
        amount: Decimal,
        term: int,
        status: CreditApplicationStatus,
        submission_date: date,
        risk_score: Optional[int],
        risk_level: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "CreditApplication":
        """Rebuild a stored application; timestamps are taken as given."""
        return cls(
            affiliate_id=affiliate_id,
            amount=amount,
            term=term,
            status=status,
            submission_date=submission_date,
            created_at=created_at,
            updated_at=updated_at,
            risk_score=risk_score,
            risk_level=risk_level,
            id=id,
        )

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def affiliate_id(self) -> int:
        return self._affiliate_id

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def term(self) -> int:
        """Term in months."""
        return self._term

    @property
    def status(self) -> CreditApplicationStatus:
        return self._status

    @property
    def submission_date(self) -> date:
        return self._submission_date

    @property
    def risk_score(self) -> Optional[int]:
        return self._risk_score

    @property
    def risk_level(self) -> Optional[str]:
        return self._risk_level

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_decided(self) -> bool:
        return self._status != CreditApplicationStatus.PENDING

    def approve(self) -> None:
        """
        Approve the application.

        Raises:
            StateError: If the application is not pending
        """
        self._transition("approve", CreditApplicationStatus.APPROVED)

    def reject(self) -> None:
        """
        Reject the application.

        Raises:
            StateError: If the application is not pending
        """
        self._transition("reject", CreditApplicationStatus.REJECTED)

    def update_risk_evaluation(self, score: int, risk_level: str) -> None:
        """
        Record the external risk evaluation. Does not change status.

        Raises:
            ValidationError: If score is negative or risk_level is blank
        """
        score = require_non_negative_int(score, "risk_score")
        risk_level = require_text(risk_level, "risk_level")
        self._risk_score = score
        self._risk_level = risk_level
        self._updated_at = datetime.now()

    def _transition(self, operation: str, target: CreditApplicationStatus) -> None:
        if self._status != CreditApplicationStatus.PENDING:
            raise StateError(
                operation,
                self._status.value,
                f"Only pending applications can be {target.value.lower()}; "
                f"current status is {self._status.value}",
            )
        self._status = target
        self._updated_at = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreditApplication):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"<CreditApplication(id={self._id}, affiliate_id={self._affiliate_id}, "
            f"status={self._status.value}, amount={self._amount}, term={self._term})>"
        )
