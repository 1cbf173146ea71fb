"""Routine endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from alexa_bridge.core.result import Err
from alexa_bridge.routers.dependencies import get_routine_service
from alexa_bridge.services.routines import RoutineService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/routines", tags=["routines"])


@router.get("")
async def list_routines(
    routine_service: RoutineService = Depends(get_routine_service),
) -> list[Any]:
    """List the routines of the Alexa account.

    Raises:
        HTTPException: 502 when Alexa fails or answers with a bad payload
    """
    result = await routine_service.get_routines()
    if isinstance(result, Err):
        logger.error(f"Routine query failed: {result.error}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error.message)
    return result.value
