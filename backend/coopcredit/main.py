"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coopcredit.api.errors import register_exception_handlers
from coopcredit.api.v1.router import api_router
from coopcredit.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, routes and error handlers."""
    application = FastAPI(
        title="CoopCredit Credit Application API",
        description="Affiliate registration and risk-based credit application evaluation",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Configure CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Include API router with v1 prefix
    application.include_router(api_router, prefix="/api/v1")

    @application.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "message": "CoopCredit Credit Application API",
            "version": "1.0.0",
            "docs": "/api/docs",
        }

    return application


app = create_app()
