"""Translation of domain exceptions into problem-detail HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from coopcredit.core.exceptions import (
    AffiliateNotFoundError,
    CreditApplicationNotFoundError,
    DomainError,
    DuplicateAffiliateError,
    ExternalServiceError,
    StateError,
    ValidationError,
)
from coopcredit.models.schemas import ProblemDetail

logger = logging.getLogger(__name__)

PROBLEM_BASE_URI = "https://coopcredit.example.com/problem"

# (status code, problem type slug, title); first matching class wins
_DOMAIN_ERROR_MAP: list[tuple[type[DomainError], int, str, str]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST, "validation", "Validation Failed"),
    (StateError, status.HTTP_409_CONFLICT, "invalid-state", "Invalid State Transition"),
    (AffiliateNotFoundError, status.HTTP_404_NOT_FOUND, "not-found", "Affiliate Not Found"),
    (
        CreditApplicationNotFoundError,
        status.HTTP_404_NOT_FOUND,
        "not-found",
        "Credit Application Not Found",
    ),
    (DuplicateAffiliateError, status.HTTP_409_CONFLICT, "duplicate", "Duplicate Affiliate"),
    (
        ExternalServiceError,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "external-service",
        "External Service Unavailable",
    ),
]


def _problem_response(
    request: Request,
    status_code: int,
    slug: str,
    title: str,
    detail: str,
    code: str | None = None,
) -> JSONResponse:
    problem = ProblemDetail(
        type=f"{PROBLEM_BASE_URI}/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        code=code,
        instance=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=problem.model_dump())


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError subclass to its HTTP status."""
    for error_type, status_code, slug, title in _DOMAIN_ERROR_MAP:
        if isinstance(exc, error_type):
            break
    else:
        status_code, slug, title = (
            status.HTTP_400_BAD_REQUEST,
            "business-error",
            "Business Rule Violation",
        )

    if status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.url.path}: {exc.message}")

    return _problem_response(request, status_code, slug, title, exc.message, exc.code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal",
        "Internal Server Error",
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain and fallback exception handlers to the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
