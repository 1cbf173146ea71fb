"""Capability state queries for registered devices."""

from __future__ import annotations

import logging

from alexa_bridge.core.errors import AlexaApiError, BridgeError
from alexa_bridge.core.interfaces import AlexaApi
from alexa_bridge.core.models import CapabilityState, GetDeviceStatesResponse
from alexa_bridge.core.result import Err, Ok, Result
from alexa_bridge.validation import decode_capability_states, validate_device_states

logger = logging.getLogger(__name__)


class DeviceStateService:
    """Fetches and decodes device capability states."""

    def __init__(self, alexa_api: AlexaApi) -> None:
        self.alexa_api = alexa_api

    async def get_states(
        self, device_ids: list[str]
    ) -> Result[dict[str, list[CapabilityState]], BridgeError]:
        """Query the capability states of several devices.

        Devices reported in the response's ``errors`` list, or whose states
        fail to decode, are logged and left out of the result.

        Args:
            device_ids: Alexa device ids

        Returns:
            Ok mapping device id to its states, or the error of the query
        """
        fetched = await self.alexa_api.get_device_states(device_ids)
        return fetched.and_then(validate_device_states).map(self._collect_states)

    def _collect_states(self, response: GetDeviceStatesResponse) -> dict[str, list[CapabilityState]]:
        for error in response.errors or []:
            logger.warning(f"Alexa could not report state for {error.id}: {error.code} {error.message}")

        states: dict[str, list[CapabilityState]] = {}
        for device_state in response.device_states or []:
            if device_state.id is None:
                logger.warning("Ignoring device state without an entity id")
                continue
            decoded = decode_capability_states(device_state)
            if isinstance(decoded, Err):
                logger.warning(f"Ignoring device state: {decoded.error}")
                continue
            states[device_state.id] = decoded.value
        return states

    async def get_state(self, device_id: str) -> Result[list[CapabilityState], BridgeError]:
        """Query the capability states of one device.

        Args:
            device_id: Alexa device id

        Returns:
            Ok with the device's states, or Err when the query failed or
            Alexa returned no state for the device
        """
        result = await self.get_states([device_id])
        if isinstance(result, Err):
            return result
        if device_id not in result.value:
            return Err(AlexaApiError(f"No state was returned for device {device_id}"))
        return Ok(result.value[device_id])
