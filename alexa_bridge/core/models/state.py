"""Device state models returned by the Alexa phoenix state API."""

from __future__ import annotations

from pydantic import Field

from alexa_bridge.core.models.device import AlexaModel


class CapabilityState(AlexaModel):
    """One queried attribute of a device.

    Examples:
        >>> CapabilityState(namespace="Alexa.PowerController", name="powerState", value="ON")
    """

    namespace: str | None = None
    name: str | None = None
    value: str | int | float | bool | None = None


class EntityReference(AlexaModel):
    """Identifies the device a response belongs to."""

    entity_id: str | None = None
    entity_type: str | None = None


class DeviceResponse(AlexaModel):
    """Generic per-device response envelope.

    Attributes:
        entity: Device the response refers to
        code: Error code (e.g., ENDPOINT_UNREACHABLE), None on success
        message: Error description
    """

    entity: EntityReference | None = None
    code: str | None = None
    message: str | None = None

    @property
    def id(self) -> str | None:
        return self.entity.entity_id if self.entity else None

    @property
    def is_success(self) -> bool:
        return self.code is None


class DeviceStateResponse(DeviceResponse):
    """Device response carrying JSON-encoded capability states."""

    capability_states: list[str] | None = None


class GetDeviceStatesResponse(AlexaModel):
    """Bulk response of a device-state query."""

    device_states: list[DeviceStateResponse] | None = Field(default=None)
    errors: list[DeviceResponse] | None = Field(default=None)
