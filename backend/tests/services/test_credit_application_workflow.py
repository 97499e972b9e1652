"""Tests for CreditApplicationWorkflow."""

import logging
from decimal import Decimal

import pytest

from coopcredit.core.enums import AffiliateStatus, CreditApplicationStatus
from coopcredit.core.exceptions import (
    AffiliateNotFoundError,
    ExternalServiceError,
    ValidationError,
)
from coopcredit.models.domain import RiskEvaluation
from coopcredit.services import CreditApplicationWorkflow


@pytest.fixture
def workflow(affiliate_store, application_store, risk_evaluator):
    return CreditApplicationWorkflow(affiliate_store, application_store, risk_evaluator)


@pytest.fixture
def active_affiliate(affiliate_store, make_affiliate):
    return affiliate_store.add(make_affiliate(id=1, document="1020304050"))


class TestWorkflowDecisions:
    """Approval and rejection outcomes."""

    @pytest.mark.asyncio
    async def test_low_risk_is_approved(
        self, workflow, active_affiliate, application_store, risk_evaluator
    ):
        result = await workflow.submit(1, Decimal("5000000"), 12)

        assert result.id is not None
        assert result.status == CreditApplicationStatus.APPROVED
        assert result.risk_score == 400
        assert result.risk_level == "BAJO"
        assert application_store.save_calls == 1
        risk_evaluator.evaluate_risk.assert_awaited_once_with(
            "1020304050", Decimal("5000000"), 12
        )

    @pytest.mark.asyncio
    async def test_high_risk_is_rejected(
        self, workflow, active_affiliate, application_store, risk_evaluator
    ):
        risk_evaluator.evaluate_risk.return_value = RiskEvaluation(850, "ALTO", "High risk")

        result = await workflow.submit(1, Decimal("1000000"), 24)

        assert result.status == CreditApplicationStatus.REJECTED
        assert result.risk_score == 850
        assert result.risk_level == "ALTO"
        assert application_store.rows[result.id].status == CreditApplicationStatus.REJECTED

    @pytest.mark.asyncio
    async def test_medium_risk_large_amount_is_rejected(
        self, workflow, active_affiliate, risk_evaluator
    ):
        risk_evaluator.evaluate_risk.return_value = RiskEvaluation(600, "MEDIO")

        result = await workflow.submit(1, Decimal("15000000"), 36)

        assert result.status == CreditApplicationStatus.REJECTED

    @pytest.mark.asyncio
    async def test_medium_risk_small_amount_is_approved(
        self, workflow, active_affiliate, risk_evaluator
    ):
        risk_evaluator.evaluate_risk.return_value = RiskEvaluation(600, "MEDIO")

        result = await workflow.submit(1, Decimal("8000000"), 36)

        assert result.status == CreditApplicationStatus.APPROVED

    @pytest.mark.asyncio
    async def test_stored_application_is_never_pending(
        self, workflow, active_affiliate, application_store
    ):
        await workflow.submit(1, Decimal("100000"), 6)
        await workflow.submit(1, Decimal("200000"), 6)

        assert all(a.is_decided for a in application_store.rows.values())


class TestWorkflowFailures:
    """Failures abort the workflow without persisting anything."""

    @pytest.mark.asyncio
    async def test_unknown_affiliate(self, workflow, application_store, risk_evaluator):
        with pytest.raises(AffiliateNotFoundError):
            await workflow.submit(999, Decimal("5000000"), 12)

        assert application_store.save_calls == 0
        risk_evaluator.evaluate_risk.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [AffiliateStatus.INACTIVE, AffiliateStatus.SUSPENDED])
    async def test_ineligible_affiliate_looks_like_unknown(
        self, workflow, affiliate_store, make_affiliate, application_store, status
    ):
        affiliate_store.add(make_affiliate(id=2, document="555", status=status))

        with pytest.raises(AffiliateNotFoundError):
            await workflow.submit(2, Decimal("5000000"), 12)

        assert application_store.save_calls == 0

    @pytest.mark.asyncio
    async def test_risk_service_failure_propagates(
        self, workflow, active_affiliate, application_store, risk_evaluator
    ):
        risk_evaluator.evaluate_risk.side_effect = ExternalServiceError(
            "risk-central", "Risk service timed out after 5.0s"
        )

        with pytest.raises(ExternalServiceError) as exc_info:
            await workflow.submit(1, Decimal("5000000"), 12)

        assert exc_info.value.service == "risk-central"
        assert application_store.save_calls == 0
        assert application_store.rows == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "amount,term", [(Decimal("0"), 12), (Decimal("-5"), 12), (Decimal("1000"), 0)]
    )
    async def test_invalid_request_rejected_before_risk_call(
        self, workflow, active_affiliate, application_store, risk_evaluator, amount, term
    ):
        with pytest.raises(ValidationError):
            await workflow.submit(1, amount, term)

        risk_evaluator.evaluate_risk.assert_not_awaited()
        assert application_store.save_calls == 0

    @pytest.mark.asyncio
    async def test_sub_cent_amount_rejected_before_decision(
        self, workflow, active_affiliate, application_store, risk_evaluator
    ):
        risk_evaluator.evaluate_risk.return_value = RiskEvaluation(600, "MEDIO")

        with pytest.raises(ValidationError):
            await workflow.submit(1, Decimal("10000000.004"), 12)

        risk_evaluator.evaluate_risk.assert_not_awaited()
        assert application_store.save_calls == 0

    @pytest.mark.asyncio
    async def test_failure_is_logged_with_stage(
        self, workflow, active_affiliate, risk_evaluator, caplog
    ):
        risk_evaluator.evaluate_risk.side_effect = ExternalServiceError("risk-central", "down")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(ExternalServiceError):
                await workflow.submit(1, Decimal("5000000"), 12)

        assert "error during evaluating_risk" in caplog.text

    @pytest.mark.asyncio
    async def test_workflow_is_reusable_after_failure(
        self, workflow, active_affiliate, risk_evaluator
    ):
        risk_evaluator.evaluate_risk.side_effect = [
            ExternalServiceError("risk-central", "down"),
            RiskEvaluation(300, "BAJO"),
        ]

        with pytest.raises(ExternalServiceError):
            await workflow.submit(1, Decimal("5000000"), 12)
        result = await workflow.submit(1, Decimal("5000000"), 12)

        assert result.status == CreditApplicationStatus.APPROVED
