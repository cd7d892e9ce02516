"""
Health check endpoints.

Provides liveness and readiness probes with database connectivity checks.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from singletonsort.db.database import session_factory

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str | None = None


def get_session_factory() -> sessionmaker[Session]:
    """Dependency that provides the database session factory."""
    return session_factory


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> HealthResponse:
    """
    Readiness probe.

    Checks database connectivity. Returns 503 if the database is unavailable.
    """
    try:
        with factory() as session:
            session.execute(text("SELECT 1"))
        return HealthResponse(status="ready", database="connected")
    except SQLAlchemyError:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", database="disconnected")
