"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health-check always returns 200 if the process is up (liveness)
    - GET /health-check/ready returns 503 if the database is unreachable (readiness)
    - Both answer with the envelope shape
"""

import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, status

from users_api.api.dependencies import get_db_manager
from users_api.api.http_handlers import handle_service_response
from users_api.core.service_response import failure, success
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.schemas.envelope import ServiceResponseSchema, failure_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health-check", tags=["Health Check"])


@router.get("", response_model=ServiceResponseSchema[None])
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return handle_service_response(success("Service is healthy", None))


@router.get(
    "/ready",
    response_model=ServiceResponseSchema[None],
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: failure_response("Database unavailable")},
)
async def readiness_check(
    db_manager: DatabaseSessionManager | None = Depends(get_db_manager),
):
    """Readiness probe: includes database connectivity."""
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return handle_service_response(
            failure("Database unavailable", None, HTTPStatus.SERVICE_UNAVAILABLE),
        )
    return handle_service_response(success("Service is ready", None))
