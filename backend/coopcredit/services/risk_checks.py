"""
Error-handling policies around the risk evaluator.

The same RiskEvaluator is called from two places with different tolerance
for failure:

- ``RequiredRiskCheck`` for credit decisions, where a failed evaluation
  aborts the request.
- ``AdvisoryRiskCheck`` for affiliate registration, where the evaluation is
  informational and a failure is only logged.
"""

import logging
from decimal import Decimal
from typing import Optional

from coopcredit.core.exceptions import ExternalServiceError
from coopcredit.models.domain import RiskEvaluation
from coopcredit.services.ports import RiskEvaluator

logger = logging.getLogger(__name__)


class RequiredRiskCheck:
    """Risk evaluation that must succeed; failures propagate to the caller."""

    def __init__(self, evaluator: RiskEvaluator):
        self.evaluator = evaluator

    async def evaluate(self, document: str, amount: Decimal, term_months: int) -> RiskEvaluation:
        """
        Evaluate risk, propagating any ExternalServiceError.

        Raises:
            ExternalServiceError: If the risk service fails
        """
        try:
            evaluation = await self.evaluator.evaluate_risk(document, amount, term_months)
        except ExternalServiceError as e:
            logger.error(f"Required risk evaluation failed: {e.message}")
            raise

        logger.info(
            f"Risk evaluation completed: score={evaluation.score}, "
            f"risk_level={evaluation.risk_level}"
        )
        return evaluation


class AdvisoryRiskCheck:
    """Risk evaluation whose failure is logged and swallowed."""

    def __init__(self, evaluator: RiskEvaluator):
        self.evaluator = evaluator

    async def evaluate(
        self, document: str, amount: Decimal, term_months: int
    ) -> Optional[RiskEvaluation]:
        """
        Evaluate risk for information only.

        Returns:
            The evaluation, or None if the risk service failed
        """
        try:
            evaluation = await self.evaluator.evaluate_risk(document, amount, term_months)
        except ExternalServiceError as e:
            logger.warning(f"Advisory risk evaluation failed for document {document}: {e.message}")
            return None

        logger.info(
            f"Advisory risk evaluation for document {document}: "
            f"score={evaluation.score}, risk_level={evaluation.risk_level}"
        )
        return evaluation
