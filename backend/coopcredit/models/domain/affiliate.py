"""Affiliate domain entity."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from coopcredit.core.enums import AffiliateStatus
from coopcredit.core.exceptions import StateError, ValidationError
from coopcredit.models.domain.validation import (
    require_past_or_present,
    require_positive_decimal,
    require_text,
)


class Affiliate:
    """
    A member of the credit cooperative.

    Instances are built through ``create`` (new registrations) or
    ``reconstruct`` (rehydration from storage). State changes go through
    ``deactivate``, ``reactivate`` and ``update_salary``; there are no public
    setters. The document is the natural key and never changes.
    """

    def __init__(
        self,
        document: str,
        name: str,
        salary: Decimal,
        registration_date: date,
        status: AffiliateStatus,
        created_at: datetime,
        updated_at: datetime,
        id: Optional[int] = None,
    ):
        self._document = require_text(document, "document")
        self._name = require_text(name, "name")
        self._salary = require_positive_decimal(salary, "salary")
        self._registration_date = require_past_or_present(
            registration_date, "registration_date"
        )
        if not isinstance(status, AffiliateStatus):
            raise ValidationError("status must be an AffiliateStatus", field="status")
        self._status = status
        self._created_at = created_at
        self._updated_at = updated_at
        self._id = id

    @classmethod
    def create(
        cls,
        name: str,
        salary: Decimal,
        registration_date: date,
        document: str,
    ) -> "Affiliate":
        """
        Register a new, active affiliate.

        Raises:
            ValidationError: If any field is missing or out of range
        """
        now = datetime.now()
        return cls(
            document=document,
            name=name,
            salary=salary,
            registration_date=registration_date,
            status=AffiliateStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: int,
        name: str,
        salary: Decimal,
        registration_date: date,
        status: AffiliateStatus,
        created_at: datetime,
        updated_at: datetime,
        document: str,
    ) -> "Affiliate":
        """Rebuild a stored affiliate; timestamps are taken as given."""
        return cls(
            document=document,
            name=name,
            salary=salary,
            registration_date=registration_date,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
            id=id,
        )

    # Read-only accessors

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def document(self) -> str:
        return self._document

    @property
    def name(self) -> str:
        return self._name

    @property
    def salary(self) -> Decimal:
        return self._salary

    @property
    def registration_date(self) -> date:
        return self._registration_date

    @property
    def status(self) -> AffiliateStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # State transitions

    def deactivate(self) -> None:
        """
        Mark the affiliate as inactive.

        Raises:
            StateError: If the affiliate is already inactive
        """
        if self._status == AffiliateStatus.INACTIVE:
            raise StateError(
                "deactivate", self._status.value, "Affiliate is already inactive"
            )
        self._status = AffiliateStatus.INACTIVE
        self._touch()

    def reactivate(self) -> None:
        """
        Mark the affiliate as active again.

        Raises:
            StateError: If the affiliate is already active
        """
        if self._status == AffiliateStatus.ACTIVE:
            raise StateError(
                "reactivate", self._status.value, "Affiliate is already active"
            )
        self._status = AffiliateStatus.ACTIVE
        self._touch()

    def update_salary(self, new_salary: Decimal) -> None:
        self._salary = require_positive_decimal(new_salary, "salary")
        self._touch()

    def is_eligible_for_credit(self) -> bool:
        """Only active affiliates with a positive salary may request credit."""
        return self._status == AffiliateStatus.ACTIVE and self._salary > 0

    def _touch(self) -> None:
        self._updated_at = datetime.now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affiliate):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"<Affiliate(id={self._id}, name={self._name!r}, "
            f"status={self._status.value}, salary={self._salary})>"
        )
