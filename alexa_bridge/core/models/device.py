"""Alexa smart-home device models.

Mirrors the entity records returned by the Alexa behaviors API. Field
names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

APPLIANCE_CATEGORY = "APPLIANCE"
GROUP_CATEGORY = "GROUP"


class AlexaModel(BaseModel):
    """Immutable model decoded from camelCase Alexa payloads."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class DmsDeviceIdentifier(AlexaModel):
    """Correlates a smart-home record with the underlying hardware."""

    device_serial_number: str | None = None
    device_type: str | None = None


class ProviderData(AlexaModel):
    """Provider-specific flags of a smart-home device.

    Attributes:
        enabled: Whether the device is enabled in the Alexa account
        category_type: "APPLIANCE", "GROUP" or another category tag
        device_type: Appliance class (e.g., LIGHT)
        dms_device_identifiers: Hardware identifiers, if any
    """

    enabled: bool
    category_type: str
    device_type: str
    dms_device_identifiers: list[DmsDeviceIdentifier] | None = None


class SmartHomeDevice(AlexaModel):
    """A remote-registered appliance or group.

    Attributes:
        id: Account-unique identifier, also used as the accessory id
        display_name: Label shown in the Alexa app, used for filtering
        description: Free text
        supported_operations: Operation names the device accepts
        provider_data: Enablement and category information

    Examples:
        >>> SmartHomeDevice.model_validate({
        ...     "id": "c2b1a4e2-8d3f-4f5e-9a6b-1c2d3e4f5a6b",
        ...     "displayName": "Kitchen Light",
        ...     "description": "Hue bulb",
        ...     "supportedOperations": ["turnOn", "turnOff"],
        ...     "providerData": {
        ...         "enabled": True,
        ...         "categoryType": "APPLIANCE",
        ...         "deviceType": "LIGHT",
        ...     },
        ... })
    """

    id: str
    display_name: str
    description: str = ""
    supported_operations: tuple[str, ...] = Field(default_factory=tuple)
    provider_data: ProviderData

    @property
    def is_group(self) -> bool:
        """Check if the record is a group of devices."""
        return self.provider_data.category_type == GROUP_CATEGORY

    @property
    def is_enabled(self) -> bool:
        return self.provider_data.enabled

    def supports(self, operation: str) -> bool:
        """Check if the device accepts an operation (e.g., 'setBrightness')."""
        return operation in self.supported_operations
