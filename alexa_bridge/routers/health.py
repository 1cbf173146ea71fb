"""Health check endpoints.

Readiness reflects the last discovery cycle: a cycle that ended with a
terminal error leaves the bridge shut down until a refresh succeeds.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from alexa_bridge.core.result import Err
from alexa_bridge.routers.dependencies import get_runner
from alexa_bridge.services.discovery import DiscoveryRunner

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Basic liveness health check.

    Returns:
        Status message (always returns 200 OK if service is running)
    """
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness_check(runner: DiscoveryRunner = Depends(get_runner)) -> JSONResponse:
    """Readiness check based on the last discovery cycle.

    Returns:
        HTTP 200 with accessory count if discovery succeeded,
        HTTP 503 with the error message otherwise
    """
    result = runner.last_result
    if result is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "starting"},
        )
    if isinstance(result, Err):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "shutdown", "error": result.error.message},
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"status": "ok", "accessories": len(result.value.accessories)},
    )
