"""In-memory accessory registrar for the home-automation hub.

Keeps one accessory per Alexa device id for the life of the process.
An accessory registered in an earlier discovery cycle is reused when
the device is found again, and dropped when it is not.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from alexa_bridge.core.models import Accessory, SmartHomeDevice

logger = logging.getLogger(__name__)

# Accessory ids are canonical UUID strings
VALID_UUID_REGEX = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


class AccessoryRegistrar:
    """Registers validated devices as hub accessories.

    Example:
        >>> registrar = AccessoryRegistrar()
        >>> registrar.is_valid_id("123")
        False
        >>> accessory = registrar.register(device)
    """

    def __init__(self) -> None:
        """Initialize with an empty accessory cache."""
        self._accessories: dict[str, Accessory] = {}

    @property
    def accessories(self) -> list[Accessory]:
        """Registered accessories in registration order."""
        return list(self._accessories.values())

    def get(self, uuid: str) -> Accessory | None:
        return self._accessories.get(uuid)

    def is_valid_id(self, device_id: str) -> bool:
        """Check a device id against the accessory-identifier format.

        Args:
            device_id: Candidate accessory id

        Returns:
            True if the id is a canonical UUID string
        """
        return VALID_UUID_REGEX.fullmatch(device_id) is not None

    def register(self, device: SmartHomeDevice) -> Accessory:
        """Register a device, reusing the accessory of an earlier cycle.

        A reused accessory is refreshed with the latest device record.

        Args:
            device: Device whose id already passed is_valid_id

        Returns:
            The registered accessory
        """
        existing = self._accessories.get(device.id)
        if existing is not None:
            logger.info(f"Updating existing accessory: {existing.display_name}")
            accessory = existing.model_copy(
                update={"device": device, "display_name": device.display_name}
            )
        else:
            logger.info(f"Adding new accessory: {device.display_name}")
            accessory = Accessory(uuid=device.id, display_name=device.display_name, device=device)

        self._accessories[device.id] = accessory
        return accessory

    def remove_stale(self, keep_ids: Iterable[str]) -> list[Accessory]:
        """Unregister accessories that discovery no longer reports.

        Args:
            keep_ids: Ids of accessories initialized in the current cycle

        Returns:
            The removed accessories
        """
        keep = set(keep_ids)
        stale = [a for uuid, a in self._accessories.items() if uuid not in keep]
        for accessory in stale:
            logger.info(f"Removing obsolete accessory: {accessory.display_name}")
            del self._accessories[accessory.uuid]
        return stale
