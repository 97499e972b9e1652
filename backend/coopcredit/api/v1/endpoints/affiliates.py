"""Affiliate endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from coopcredit.core.exceptions import ValidationError
from coopcredit.deps import get_affiliate_service
from coopcredit.models.schemas import (
    AffiliateCreate,
    AffiliateResponse,
    AffiliateSalaryUpdate,
)
from coopcredit.services import AffiliateService

logger = logging.getLogger(__name__)

router = APIRouter()

AffiliateServiceDep = Annotated[AffiliateService, Depends(get_affiliate_service)]


@router.post(
    "/",
    response_model=AffiliateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an affiliate",
    description="Register a new cooperative member; the document must be unique",
)
async def create_affiliate(
    affiliate_data: AffiliateCreate,
    service: AffiliateServiceDep,
) -> AffiliateResponse:
    """
    Register a new affiliate.

    The affiliate starts ACTIVE. A risk evaluation is requested for
    information only; if the risk service is down the registration still
    succeeds.
    """
    affiliate = await service.register(
        name=affiliate_data.name,
        document=affiliate_data.document,
        salary=affiliate_data.salary,
        registration_date=affiliate_data.registration_date,
    )
    return AffiliateResponse.from_domain(affiliate)


@router.get(
    "/{affiliate_id}",
    response_model=AffiliateResponse,
    summary="Get affiliate by ID",
)
async def get_affiliate(affiliate_id: int, service: AffiliateServiceDep) -> AffiliateResponse:
    affiliate = await service.get_by_id(affiliate_id)
    return AffiliateResponse.from_domain(affiliate)


@router.get(
    "/",
    response_model=AffiliateResponse,
    summary="Find affiliate by document",
    description="Look up an affiliate by its identity document",
)
async def get_affiliate_by_document(
    service: AffiliateServiceDep,
    document: Annotated[Optional[str], Query(description="Identity document")] = None,
) -> AffiliateResponse:
    if document is None or not document.strip():
        raise ValidationError("document is required", field="document")
    affiliate = await service.get_by_document(document.strip())
    return AffiliateResponse.from_domain(affiliate)


@router.post(
    "/{affiliate_id}/deactivate",
    response_model=AffiliateResponse,
    summary="Deactivate an affiliate",
)
async def deactivate_affiliate(affiliate_id: int, service: AffiliateServiceDep) -> AffiliateResponse:
    """Inactive affiliates cannot request credit."""
    affiliate = await service.deactivate(affiliate_id)
    return AffiliateResponse.from_domain(affiliate)


@router.post(
    "/{affiliate_id}/reactivate",
    response_model=AffiliateResponse,
    summary="Reactivate an affiliate",
)
async def reactivate_affiliate(affiliate_id: int, service: AffiliateServiceDep) -> AffiliateResponse:
    affiliate = await service.reactivate(affiliate_id)
    return AffiliateResponse.from_domain(affiliate)


@router.patch(
    "/{affiliate_id}/salary",
    response_model=AffiliateResponse,
    summary="Update an affiliate's salary",
)
async def update_affiliate_salary(
    affiliate_id: int,
    update_data: AffiliateSalaryUpdate,
    service: AffiliateServiceDep,
) -> AffiliateResponse:
    affiliate = await service.update_salary(affiliate_id, update_data.salary)
    logger.info(f"Updated salary for affiliate {affiliate_id}")
    return AffiliateResponse.from_domain(affiliate)
