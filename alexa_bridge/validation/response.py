"""Validation of raw Alexa API payloads.

Turns untyped JSON bodies into typed values or ``InvalidResponse``
errors. Nothing in this module raises or has side effects.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from alexa_bridge.core.errors import InvalidResponse
from alexa_bridge.core.models import (
    CapabilityState,
    DeviceStateResponse,
    GetDeviceStatesResponse,
    SmartHomeDevice,
)
from alexa_bridge.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def _serialize(raw: Any) -> str:
    """Render a payload for error messages."""
    return json.dumps(raw, indent=2, default=str)


def _validate_list(raw: Any, kind: str) -> Result[list[Any], InvalidResponse]:
    if raw is None:
        return Err(
            InvalidResponse(f"No Alexa {kind} were found for the current Alexa account")
        )
    if not isinstance(raw, (list, tuple)):
        return Err(
            InvalidResponse(
                f"Invalid list of Alexa {kind} found for the current Alexa account: "
                + _serialize(raw)
            )
        )
    return Ok(raw)


def validate_device_list(raw: Any) -> Result[list[Any], InvalidResponse]:
    """Check that the device payload is present and list-shaped.

    Elements are not inspected; they are decoded later by the pipeline.

    Args:
        raw: Decoded JSON body of the device listing

    Returns:
        Ok with the payload unchanged, or Err(InvalidResponse)
    """
    return _validate_list(raw, "devices")


def validate_routine_list(raw: Any) -> Result[list[Any], InvalidResponse]:
    """Check that the routine payload is present and list-shaped."""
    return _validate_list(raw, "routines")


def decode_device(raw: Any) -> Result[SmartHomeDevice, InvalidResponse]:
    """Decode a single device record.

    Args:
        raw: One element of a validated device list

    Returns:
        Ok(SmartHomeDevice), or Err(InvalidResponse) echoing the record
    """
    try:
        return Ok(SmartHomeDevice.model_validate(raw))
    except PydanticValidationError as e:
        logger.debug(f"Device record failed validation: {e}")
        return Err(InvalidResponse(f"Invalid Alexa device record: {_serialize(raw)}"))


def validate_device_states(raw: Any) -> Result[GetDeviceStatesResponse, InvalidResponse]:
    """Decode a device-state query response.

    Args:
        raw: Decoded JSON body of the state query

    Returns:
        Ok(GetDeviceStatesResponse), or Err(InvalidResponse)
    """
    if raw is None:
        return Err(InvalidResponse("No device states were returned for the current Alexa account"))
    if not isinstance(raw, Mapping):
        return Err(InvalidResponse(f"Invalid device state response: {_serialize(raw)}"))
    try:
        return Ok(GetDeviceStatesResponse.model_validate(raw))
    except PydanticValidationError as e:
        logger.debug(f"Device state response failed validation: {e}")
        return Err(InvalidResponse(f"Invalid device state response: {_serialize(raw)}"))


def decode_capability_states(
    response: DeviceStateResponse,
) -> Result[list[CapabilityState], InvalidResponse]:
    """Decode the JSON-encoded capability states of one device.

    A null ``capability_states`` means the device reported nothing and
    yields an empty list.

    Args:
        response: Per-device state response

    Returns:
        Ok with states in payload order, or Err on the first bad entry
    """
    states: list[CapabilityState] = []
    for entry in response.capability_states or []:
        try:
            data = json.loads(entry)
            if not isinstance(data, Mapping):
                raise ValueError("capability state is not an object")
            states.append(CapabilityState.model_validate(data))
        except (TypeError, ValueError) as e:
            # JSONDecodeError and pydantic's ValidationError are ValueErrors
            logger.debug(f"Capability state failed to decode: {e}")
            return Err(
                InvalidResponse(f"Invalid capability state for device {response.id}: {entry}")
            )
    return Ok(states)
