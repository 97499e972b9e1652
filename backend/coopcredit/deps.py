"""Dependency injection for FastAPI endpoints."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coopcredit.db.session import get_db
from coopcredit.repositories import AffiliateRepository, CreditApplicationRepository
from coopcredit.services import (
    AffiliateService,
    CreditApplicationQueryService,
    CreditApplicationWorkflow,
)
from coopcredit.services.ports import RiskEvaluator
from coopcredit.services.risk_central import RiskCentralClient


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    This is an alias for get_db for clarity in endpoint signatures.
    """
    async for session in get_db():
        yield session


async def get_risk_evaluator() -> AsyncGenerator[RiskEvaluator, None]:
    """Provide a Risk Central client, closed when the request ends."""
    client = RiskCentralClient()
    try:
        yield client
    finally:
        await client.close()


SessionDep = Annotated[AsyncSession, Depends(get_session)]
RiskEvaluatorDep = Annotated[RiskEvaluator, Depends(get_risk_evaluator)]


def get_affiliate_service(db: SessionDep, risk_evaluator: RiskEvaluatorDep) -> AffiliateService:
    repo = AffiliateRepository(db)
    return AffiliateService(reader=repo, writer=repo, risk_evaluator=risk_evaluator)


def get_credit_workflow(
    db: SessionDep, risk_evaluator: RiskEvaluatorDep
) -> CreditApplicationWorkflow:
    return CreditApplicationWorkflow(
        affiliates=AffiliateRepository(db),
        applications=CreditApplicationRepository(db),
        risk_evaluator=risk_evaluator,
    )


def get_credit_query_service(
    db: SessionDep,
    affiliates: Annotated[AffiliateService, Depends(get_affiliate_service)],
) -> CreditApplicationQueryService:
    return CreditApplicationQueryService(CreditApplicationRepository(db), affiliates)
