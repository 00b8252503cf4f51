"""
Health check router.

Liveness/readiness endpoint for the catalog. Reports the application
version and whether the catalog database answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.interfaces.subway.dependencies import get_engine
from app.interfaces.subway.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and database reachability.",
    responses={503: {"model": HealthResponse}},
)
def health_check(response: Response, engine: Engine = Depends(get_engine)) -> HealthResponse:
    """Return application health; 503 when the database does not answer."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check: database unreachable.")
        response.status_code = 503
        return HealthResponse(status="degraded", version=settings.version, database="unavailable")

    return HealthResponse(status="ok", version=settings.version, database="ok")
