"""Hub-side accessory model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from alexa_bridge.core.models.device import SmartHomeDevice


class Accessory(BaseModel):
    """A device registered with the home-automation hub.

    Attributes:
        uuid: Accessory identifier (the Alexa device id)
        display_name: Name shown in the hub
        device: Alexa record the accessory was created from
    """

    model_config = ConfigDict(frozen=True)

    uuid: str
    display_name: str
    device: SmartHomeDevice
