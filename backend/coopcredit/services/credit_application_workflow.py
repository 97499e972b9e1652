"""Credit application evaluation workflow."""

import logging
from decimal import Decimal
from typing import Optional

from coopcredit.core.enums import WorkflowStage
from coopcredit.core.exceptions import AffiliateNotFoundError
from coopcredit.models.domain import Affiliate, CreditApplication
from coopcredit.services.approval_policy import ApprovalPolicy
from coopcredit.services.ports import (
    AffiliateReader,
    CreditApplicationWriter,
    RiskEvaluator,
)
from coopcredit.services.risk_checks import RequiredRiskCheck

logger = logging.getLogger(__name__)


class CreditApplicationWorkflow:
    """
    Orchestrates the evaluation of a single credit application.

    Stages run strictly in sequence:
    VALIDATING_AFFILIATE -> EVALUATING_RISK -> DECIDING -> PERSISTING -> DONE,
    with any failure ending in ERROR.

    The application is only written once it carries both the risk
    evaluation and the final decision, so no PENDING row is ever stored.
    The workflow keeps no per-request state; one instance may serve
    concurrent requests.
    """

    def __init__(
        self,
        affiliates: AffiliateReader,
        applications: CreditApplicationWriter,
        risk_evaluator: RiskEvaluator,
        policy: Optional[ApprovalPolicy] = None,
    ):
        """
        Initialize the workflow.

        Args:
            affiliates: Affiliate lookup used for the eligibility check
            applications: Writer used to persist the decided application
            risk_evaluator: External risk service
            policy: Approval rules (defaults to ApprovalPolicy)
        """
        self.affiliates = affiliates
        self.applications = applications
        self.risk_check = RequiredRiskCheck(risk_evaluator)
        self.policy = policy or ApprovalPolicy()

    async def submit(self, affiliate_id: int, amount: Decimal, term: int) -> CreditApplication:
        """
        Evaluate and store a credit application.

        Args:
            affiliate_id: ID of the requesting affiliate
            amount: Requested amount
            term: Term in months

        Returns:
            The persisted application, APPROVED or REJECTED

        Raises:
            AffiliateNotFoundError: If the affiliate is unknown or not active
            ValidationError: If amount, term or affiliate_id are invalid
            ExternalServiceError: If risk evaluation fails; nothing is stored
        """
        stage = WorkflowStage.VALIDATING_AFFILIATE
        try:
            self._log_stage(stage, affiliate_id)
            affiliate = await self._load_eligible_affiliate(affiliate_id)

            logger.info(
                f"Creating credit application for affiliate ID: {affiliate_id}, "
                f"amount: {amount}, term: {term}"
            )
            application = CreditApplication.create(affiliate_id, amount, term)

            stage = WorkflowStage.EVALUATING_RISK
            self._log_stage(stage, affiliate_id)
            evaluation = await self.risk_check.evaluate(
                affiliate.document, application.amount, application.term
            )

            stage = WorkflowStage.DECIDING
            self._log_stage(stage, affiliate_id)
            approved = self.policy.decide(application.amount, evaluation.risk_level)
            application.update_risk_evaluation(evaluation.score, evaluation.risk_level)
            if approved:
                application.approve()
            else:
                application.reject()
            logger.info(
                f"Credit application {application.status.value} "
                f"for affiliate ID: {affiliate_id}"
            )

            stage = WorkflowStage.PERSISTING
            self._log_stage(stage, affiliate_id)
            saved = await self.applications.save(application)

            self._log_stage(WorkflowStage.DONE, affiliate_id)
            return saved

        except Exception as e:
            logger.warning(
                f"Credit application workflow for affiliate ID {affiliate_id} "
                f"moved to {WorkflowStage.ERROR.value} during {stage.value}: {e}"
            )
            raise

    async def _load_eligible_affiliate(self, affiliate_id: int) -> Affiliate:
        affiliate = await self.affiliates.find_by_id(affiliate_id)
        if affiliate is None or not affiliate.is_eligible_for_credit():
            # Unknown and inactive affiliates are indistinguishable to callers
            raise AffiliateNotFoundError(
                f"Affiliate with ID {affiliate_id} not found or not active"
            )
        return affiliate

    @staticmethod
    def _log_stage(stage: WorkflowStage, affiliate_id: int) -> None:
        logger.debug(f"Credit workflow for affiliate ID {affiliate_id}: {stage.value}")
