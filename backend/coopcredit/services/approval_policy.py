"""Approval rules turning a risk evaluation and an amount into a decision."""

import logging
from decimal import Decimal

logger = logging.getLogger(__name__)

HIGH_RISK_KEYWORD = "ALTO"
MEDIUM_RISK_KEYWORD = "MEDIO"

# Medium-risk applications above this amount are rejected.
MEDIUM_RISK_MAX_AMOUNT = Decimal("10000000")


class ApprovalPolicy:
    """
    Deterministic approval rules, evaluated in order (first match wins):

    1. Risk level mentions ALTO (high risk) -> reject.
    2. Risk level mentions MEDIO (medium risk) and amount > 10,000,000 -> reject.
    3. Otherwise -> approve.

    Levels are matched by keyword because the risk service returns composite
    labels such as "ALTO RIESGO".
    """

    @staticmethod
    def decide(amount: Decimal, risk_level: str) -> bool:
        """
        Decide whether an application should be approved.

        Args:
            amount: Requested credit amount
            risk_level: Risk tier label from the risk evaluation

        Returns:
            True to approve, False to reject
        """
        if HIGH_RISK_KEYWORD in risk_level:
            logger.debug(f"Rejecting: high risk level {risk_level!r}")
            return False

        if MEDIUM_RISK_KEYWORD in risk_level and amount > MEDIUM_RISK_MAX_AMOUNT:
            logger.debug(
                f"Rejecting: medium risk and amount {amount} > {MEDIUM_RISK_MAX_AMOUNT}"
            )
            return False

        logger.debug(f"Approving: risk level {risk_level!r}, amount {amount}")
        return True
