"""API v1 router configuration."""

from fastapi import APIRouter

from coopcredit.api.v1.endpoints import affiliates, credit_applications, health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    affiliates.router,
    prefix="/affiliates",
    tags=["affiliates"],
)

api_router.include_router(
    credit_applications.router,
    prefix="/credit-applications",
    tags=["credit-applications"],
)
