"""Credit application endpoints."""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from coopcredit.deps import get_credit_query_service, get_credit_workflow
from coopcredit.models.schemas import CreditApplicationCreate, CreditApplicationResponse
from coopcredit.services import CreditApplicationQueryService, CreditApplicationWorkflow

logger = logging.getLogger(__name__)

router = APIRouter()

QueryServiceDep = Annotated[CreditApplicationQueryService, Depends(get_credit_query_service)]


@router.post(
    "/",
    response_model=CreditApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a credit application",
    description="Evaluate a credit application against the risk service and approval rules",
)
async def create_credit_application(
    application_data: CreditApplicationCreate,
    workflow: Annotated[CreditApplicationWorkflow, Depends(get_credit_workflow)],
) -> CreditApplicationResponse:
    """
    Submit a credit application.

    The application is evaluated synchronously and returned already
    APPROVED or REJECTED. If the risk service is unavailable the request
    fails with 503 and nothing is stored.
    """
    logger.info(
        f"Received credit application for affiliate ID: {application_data.affiliate_id}"
    )
    application = await workflow.submit(
        affiliate_id=application_data.affiliate_id,
        amount=application_data.amount,
        term=application_data.term,
    )
    logger.info(f"Credit application created with ID: {application.id}")
    return CreditApplicationResponse.from_domain(application)


@router.get(
    "/{application_id}",
    response_model=CreditApplicationResponse,
    summary="Get credit application by ID",
)
async def get_credit_application(
    application_id: int,
    service: QueryServiceDep,
) -> CreditApplicationResponse:
    application = await service.get_by_id(application_id)
    return CreditApplicationResponse.from_domain(application)


@router.get(
    "/by-affiliate/{document}",
    response_model=List[CreditApplicationResponse],
    summary="List an affiliate's credit applications",
    description="Retrieve all credit applications of the affiliate owning a document, newest first",
)
async def list_credit_applications_by_affiliate(
    document: str,
    service: QueryServiceDep,
) -> List[CreditApplicationResponse]:
    applications = await service.list_by_affiliate_document(document)
    return [CreditApplicationResponse.from_domain(app) for app in applications]
