"""Tests for the Affiliate entity."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from coopcredit.core.enums import AffiliateStatus
from coopcredit.core.exceptions import StateError, ValidationError
from coopcredit.models.domain import Affiliate


def _create(**overrides) -> Affiliate:
    fields = {
        "name": "Ana Gomez",
        "salary": Decimal("50000"),
        "registration_date": date.today(),
        "document": "1020304050",
    }
    fields.update(overrides)
    return Affiliate.create(**fields)


class TestAffiliateCreate:
    """Tests for Affiliate.create."""

    def test_create_sets_active_status_and_timestamps(self):
        before = datetime.now()
        affiliate = _create()

        assert affiliate.id is None
        assert affiliate.status == AffiliateStatus.ACTIVE
        assert affiliate.created_at >= before
        assert affiliate.updated_at == affiliate.created_at
        assert affiliate.is_eligible_for_credit() is True

    def test_create_coerces_salary_to_decimal(self):
        affiliate = _create(salary="2500000.50")

        assert affiliate.salary == Decimal("2500000.50")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError) as exc_info:
            _create(name=name)

        assert exc_info.value.field == "name"

    @pytest.mark.parametrize("document", ["", "  ", None])
    def test_blank_document_rejected(self, document):
        with pytest.raises(ValidationError) as exc_info:
            _create(document=document)

        assert exc_info.value.field == "document"

    @pytest.mark.parametrize("salary", [Decimal("0"), Decimal("-1"), None, "abc"])
    def test_non_positive_salary_rejected(self, salary):
        with pytest.raises(ValidationError):
            _create(salary=salary)

    def test_future_registration_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _create(registration_date=date.today() + timedelta(days=1))

        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_missing_registration_date_rejected(self):
        with pytest.raises(ValidationError):
            _create(registration_date=None)


class TestAffiliateReconstruct:
    """Tests for Affiliate.reconstruct."""

    def test_reconstruct_keeps_given_values(self):
        created = datetime(2024, 1, 1, 9, 30)
        updated = datetime(2024, 6, 1, 12, 0)

        affiliate = Affiliate.reconstruct(
            id=7,
            name="Luis Perez",
            salary=Decimal("1800000"),
            registration_date=date(2023, 12, 1),
            status=AffiliateStatus.SUSPENDED,
            created_at=created,
            updated_at=updated,
            document="998877",
        )

        assert affiliate.id == 7
        assert affiliate.status == AffiliateStatus.SUSPENDED
        assert affiliate.created_at == created
        assert affiliate.updated_at == updated
        assert affiliate.is_eligible_for_credit() is False

    def test_reconstruct_validates_fields(self):
        with pytest.raises(ValidationError):
            Affiliate.reconstruct(
                id=7,
                name="Luis Perez",
                salary=Decimal("-5"),
                registration_date=date(2023, 12, 1),
                status=AffiliateStatus.ACTIVE,
                created_at=datetime.now(),
                updated_at=datetime.now(),
                document="998877",
            )


class TestAffiliateTransitions:
    """Tests for deactivate, reactivate and update_salary."""

    def test_deactivate_active_affiliate(self, make_affiliate):
        affiliate = make_affiliate()
        previous_update = affiliate.updated_at

        affiliate.deactivate()

        assert affiliate.status == AffiliateStatus.INACTIVE
        assert affiliate.updated_at >= previous_update
        assert affiliate.is_eligible_for_credit() is False

    def test_deactivate_twice_fails(self, make_affiliate):
        affiliate = make_affiliate(status=AffiliateStatus.INACTIVE)

        with pytest.raises(StateError):
            affiliate.deactivate()

    def test_deactivate_suspended_affiliate(self, make_affiliate):
        affiliate = make_affiliate(status=AffiliateStatus.SUSPENDED)

        affiliate.deactivate()

        assert affiliate.status == AffiliateStatus.INACTIVE

    def test_reactivate_inactive_affiliate(self, make_affiliate):
        affiliate = make_affiliate(status=AffiliateStatus.INACTIVE)

        affiliate.reactivate()

        assert affiliate.status == AffiliateStatus.ACTIVE
        assert affiliate.is_eligible_for_credit() is True

    def test_reactivate_active_affiliate_fails(self, make_affiliate):
        affiliate = make_affiliate()

        with pytest.raises(StateError) as exc_info:
            affiliate.reactivate()

        assert exc_info.value.current_state == "ACTIVE"

    def test_update_salary(self, make_affiliate):
        affiliate = make_affiliate()

        affiliate.update_salary(Decimal("75000"))

        assert affiliate.salary == Decimal("75000")

    @pytest.mark.parametrize("salary", [Decimal("0"), Decimal("-100")])
    def test_update_salary_rejects_non_positive(self, make_affiliate, salary):
        affiliate = make_affiliate()

        with pytest.raises(ValidationError):
            affiliate.update_salary(salary)

        assert affiliate.salary == Decimal("50000")

    def test_document_is_read_only(self, make_affiliate):
        affiliate = make_affiliate()

        with pytest.raises(AttributeError):
            affiliate.document = "other"


class TestSalaryPrecision:
    @pytest.mark.parametrize("salary", [Decimal("0.001"), Decimal("2500000.555")])
    def test_salary_with_more_than_two_decimals_rejected(self, salary):
        with pytest.raises(ValidationError) as exc_info:
            _create(salary=salary)

        assert exc_info.value.field == "salary"

    def test_update_salary_rejects_extra_decimals(self, make_affiliate):
        affiliate = make_affiliate()

        with pytest.raises(ValidationError):
            affiliate.update_salary(Decimal("100.125"))

        assert affiliate.salary == Decimal("50000")
