"""Accessory and device state endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from alexa_bridge.core.models import Accessory
from alexa_bridge.core.result import Err
from alexa_bridge.hub import AccessoryRegistrar
from alexa_bridge.routers.dependencies import get_registrar, get_runner, get_state_service
from alexa_bridge.services.device_states import DeviceStateService
from alexa_bridge.services.discovery import DiscoveryRunner

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/devices", tags=["devices"])


def _accessory_summary(accessory: Accessory) -> dict[str, Any]:
    device = accessory.device
    return {
        "uuid": accessory.uuid,
        "display_name": accessory.display_name,
        "device_type": device.provider_data.device_type,
        "enabled": device.is_enabled,
        "supported_operations": list(device.supported_operations),
    }


@router.get("")
async def list_accessories(
    runner: DiscoveryRunner = Depends(get_runner),
    registrar: AccessoryRegistrar = Depends(get_registrar),
) -> list[dict[str, Any]]:
    """List registered accessories.

    Returns:
        Accessory summaries, empty when the bridge is shut down
    """
    if runner.is_shut_down:
        return []
    return [_accessory_summary(a) for a in registrar.accessories]


@router.get("/{device_id}/state")
async def get_device_state(
    device_id: str,
    registrar: AccessoryRegistrar = Depends(get_registrar),
    state_service: DeviceStateService = Depends(get_state_service),
) -> dict[str, Any]:
    """Get the capability states of a registered accessory.

    Raises:
        HTTPException: 404 for unknown accessories, 502 when Alexa fails
    """
    if registrar.get(device_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Accessory not found")

    result = await state_service.get_state(device_id)
    if isinstance(result, Err):
        logger.error(f"State query for {device_id} failed: {result.error}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error.message)

    return {
        "uuid": device_id,
        "capability_states": [s.model_dump() for s in result.value],
    }


@router.post("/refresh")
async def refresh_devices(runner: DiscoveryRunner = Depends(get_runner)) -> dict[str, Any]:
    """Run a new discovery cycle.

    Returns:
        Cycle outcome with accessory count and per-device errors
    """
    result = await runner.run()
    if isinstance(result, Err):
        return {"status": "shutdown", "error": result.error.message}

    report = result.value
    return {
        "status": "ok",
        "accessories": len(report.accessories),
        "errors": [e.message for e in report.errors],
        "removed": [a.uuid for a in report.removed],
    }
