"""Accessory identity checks for discovered devices."""

from __future__ import annotations

from collections.abc import Callable

from alexa_bridge.core.errors import ValidationError
from alexa_bridge.core.models import SmartHomeDevice
from alexa_bridge.core.result import Err, Ok, Result


def validate_device_id(
    device: SmartHomeDevice,
    is_valid_id: Callable[[str], bool],
) -> Result[SmartHomeDevice, ValidationError]:
    """Check that a device id can be used as an accessory id.

    Args:
        device: Device about to be registered
        is_valid_id: The hub's identifier predicate

    Returns:
        Ok with the device unchanged, or Err(ValidationError) naming the id
    """
    if is_valid_id(device.id):
        return Ok(device)
    return Err(ValidationError(f"id: '{device.id}' is not a valid Smart Home device id"))
