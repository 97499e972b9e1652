"""Risk evaluation value object returned by the external risk service."""

from dataclasses import dataclass

from coopcredit.models.domain.validation import require_non_negative_int, require_text


@dataclass(frozen=True)
class RiskEvaluation:
    """
    Result of an external risk evaluation.

    Transient: the workflow copies score and risk_level into the credit
    application and discards the rest.

    Attributes:
        score: Non-negative risk score
        risk_level: Qualitative tier label (e.g. "BAJO", "MEDIO", "ALTO RIESGO")
        detail: Free-text explanation from the risk service
    """

    score: int
    risk_level: str
    detail: str = ""

    def __post_init__(self):
        """Validate score and level; normalize a missing detail to ''."""
        require_non_negative_int(self.score, "score")
        require_text(self.risk_level, "risk_level")
        if self.detail is None:
            object.__setattr__(self, "detail", "")
