"""Typed models for Alexa smart-home payloads and hub accessories.

Every optional field of the remote API is modelled as nullable; nothing
is assumed present until decoded.
"""

from alexa_bridge.core.models.accessory import Accessory
from alexa_bridge.core.models.device import (
    APPLIANCE_CATEGORY,
    GROUP_CATEGORY,
    DmsDeviceIdentifier,
    ProviderData,
    SmartHomeDevice,
)
from alexa_bridge.core.models.state import (
    CapabilityState,
    DeviceResponse,
    DeviceStateResponse,
    EntityReference,
    GetDeviceStatesResponse,
)

__all__ = [
    "APPLIANCE_CATEGORY",
    "GROUP_CATEGORY",
    "Accessory",
    "CapabilityState",
    "DeviceResponse",
    "DeviceStateResponse",
    "DmsDeviceIdentifier",
    "EntityReference",
    "GetDeviceStatesResponse",
    "ProviderData",
    "SmartHomeDevice",
]
