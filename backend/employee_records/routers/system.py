"""Liveness and readiness probes."""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_session
from ..logging_config import get_logger

router = APIRouter(tags=["system"])
logger = get_logger(__name__)


@router.get("/health")
async def healthcheck() -> dict[str, str]:
    """Simple liveness probe for uptime checks."""

    return {"status": "ok"}


@router.get("/ready")
async def readiness(
    response: Response, session: AsyncSession = Depends(get_session)
) -> dict[str, str]:
    """Check that the database answers."""

    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.exception("readiness_check_failed")
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "degraded", "database": "error"}
    return {"status": "ok", "database": "ok"}
