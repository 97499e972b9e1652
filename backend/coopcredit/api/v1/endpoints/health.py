"""Liveness and database readiness endpoint."""

import logging

from fastapi import APIRouter
from sqlalchemy import text

from coopcredit.config import settings
from coopcredit.deps import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: SessionDep) -> dict:
    """
    Report API liveness and whether the database answers a trivial query.

    The endpoint always answers 200; a database failure only turns the
    overall status into "degraded".
    """
    try:
        await db.execute(text("SELECT 1"))
        database = "healthy"
    except Exception as e:
        logger.warning(f"Health check could not reach the database: {e}")
        database = "unhealthy"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "environment": settings.ENVIRONMENT,
        "database": database,
    }
