"""Core enums for type safety across the application."""

from enum import Enum


class AffiliateStatus(str, Enum):
    """Cooperative membership states."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class CreditApplicationStatus(str, Enum):
    """Credit application decision states.

    PENDING is the only non-terminal state.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class WorkflowStage(str, Enum):
    """Stages of the credit application evaluation workflow."""

    VALIDATING_AFFILIATE = "validating_affiliate"
    EVALUATING_RISK = "evaluating_risk"
    DECIDING = "deciding"
    PERSISTING = "persisting"
    DONE = "done"
    ERROR = "error"
