"""
Shutdown endpoint.

Lets the browser stop the local server. Only available when the app runs
under the launcher, which registers its uvicorn server on app.state.
"""

import asyncio
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["shutdown"])

# Seconds to wait so the response is sent before the server stops
SHUTDOWN_DELAY = 0.5


class ShutdownResponse(BaseModel):
    message: str


def get_server(request: Request) -> Any:
    """Dependency that provides the running uvicorn server, or None."""
    return getattr(request.app.state, "server", None)


def _stop(server: Any) -> None:
    logger.info("Shutdown requested via API")
    server.should_exit = True


@router.post("/shutdown", response_model=ShutdownResponse)
async def shutdown(server: Annotated[Any, Depends(get_server)]) -> ShutdownResponse:
    """
    Stop the server after a short delay.

    Returns 503 if the app is not running under the launcher.
    """
    if server is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Shutdown is not available",
        )

    asyncio.get_running_loop().call_later(SHUTDOWN_DELAY, _stop, server)
    return ShutdownResponse(message="Server shutting down...")
