"""
Health check endpoints.

``/health`` only reports that the process is up; ``/ready`` also pings the
database and answers 503 while it is unreachable.
"""

import time

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette import status

from books_api.database import DatabaseSession

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str
    version: str
    uptime: int


class DatabaseStatus(BaseModel):
    status: str
    error: str | None = None


class ReadinessResponse(BaseModel):
    """Readiness response, including the database check."""

    status: str
    version: str | None = None
    uptime: int | None = None
    db: DatabaseStatus


def _uptime_seconds(request: Request) -> int:
    return int(time.monotonic() - request.app.state.started_at)


@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Report that the service process is alive."""
    return HealthResponse(
        status="ok",
        version=request.app.state.settings.VERSION,
        uptime=_uptime_seconds(request),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ReadinessResponse}},
)
def readiness_check(request: Request, db: DatabaseSession) -> ReadinessResponse | JSONResponse:
    """Report whether the service can reach its database."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("readiness_check_failed", error=str(e), exc_info=True)
        # Details stay in the log; the body only names the error class
        body = ReadinessResponse(
            status="unhealthy", db=DatabaseStatus(status="down", error=type(e).__name__)
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(exclude_none=True),
        )

    return ReadinessResponse(
        status="ready",
        version=request.app.state.settings.VERSION,
        uptime=_uptime_seconds(request),
        db=DatabaseStatus(status="up"),
    )
