"""Device discovery pipeline.

One discovery cycle runs:

1. Fetch the device list from the Alexa account
2. Validate that the payload is a list
3. Decode each record (malformed records are skipped)
4. Filter against the configured display names
5. Validate each device id and register it as an accessory

Steps 1, 2 and 4 short-circuit the cycle with a terminal error. Step 3
and step 5 collect per-device errors and carry on with the remaining
devices.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from alexa_bridge.core.errors import BridgeError, ValidationError
from alexa_bridge.core.interfaces import AccessoryHub, AlexaApi
from alexa_bridge.core.models import Accessory, SmartHomeDevice
from alexa_bridge.core.result import Err, Ok, Result, partition
from alexa_bridge.services.device_filter import filter_devices
from alexa_bridge.services.identity import validate_device_id
from alexa_bridge.validation import decode_device, validate_device_list

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryReport:
    """Outcome of a successful discovery cycle.

    Attributes:
        accessories: Accessories initialized in this cycle
        errors: Per-device errors (malformed records, invalid or repeated ids)
        removed: Accessories from earlier cycles dropped because Alexa no longer lists them
    """

    accessories: list[Accessory] = field(default_factory=list)
    errors: list[BridgeError] = field(default_factory=list)
    removed: list[Accessory] = field(default_factory=list)


class DiscoveryPipeline:
    """Discovers Alexa devices and registers them with the hub."""

    def __init__(
        self,
        alexa_api: AlexaApi,
        hub: AccessoryHub,
        device_names: Sequence[str] | None = None,
    ) -> None:
        """Initialize discovery pipeline.

        Args:
            alexa_api: Remote Alexa API
            hub: Accessory registrar of the home-automation hub
            device_names: Display names to expose, None for all devices
        """
        self.alexa_api = alexa_api
        self.hub = hub
        self.device_names = list(device_names) if device_names is not None else None

    def _decode_devices(self, raw_devices: list[Any]) -> tuple[list[SmartHomeDevice], list[BridgeError]]:
        devices, errors = partition(decode_device(raw) for raw in raw_devices)
        for error in errors:
            logger.warning(f"Skipping device: {error}")
        return devices, list(errors)

    async def _find_devices(self) -> tuple[Result[list[SmartHomeDevice], BridgeError], list[BridgeError]]:
        fetched = await self.alexa_api.get_devices()
        validated = fetched.and_then(validate_device_list)
        if isinstance(validated, Err):
            return validated, []

        devices, decode_errors = self._decode_devices(validated.value)
        return filter_devices(devices, self.device_names), decode_errors

    async def find_devices(self) -> Result[list[SmartHomeDevice], BridgeError]:
        """Fetch, validate and filter the account's devices.

        Returns:
            Ok with the devices to expose, or the terminal error
        """
        result, _ = await self._find_devices()
        return result

    def init_accessory(self, device: SmartHomeDevice) -> Result[Accessory, BridgeError]:
        """Validate one device id and register the device.

        Args:
            device: Device that passed the filter

        Returns:
            Ok(Accessory), or Err(ValidationError) for an unusable id
        """
        return validate_device_id(device, self.hub.is_valid_id).map(self.hub.register)

    def _init_unique(
        self, devices: Sequence[SmartHomeDevice]
    ) -> Iterator[Result[Accessory, BridgeError]]:
        # First occurrence of an id wins; repeats are reported per device
        seen: set[str] = set()
        for device in devices:
            if device.id in seen:
                yield Err(ValidationError(f"id: '{device.id}' is a duplicate Smart Home device id"))
                continue
            seen.add(device.id)
            yield self.init_accessory(device)

    async def run(self) -> Result[DiscoveryReport, BridgeError]:
        """Run one full discovery cycle.

        Returns:
            Ok(DiscoveryReport), or the terminal error that aborted the cycle
        """
        found, decode_errors = await self._find_devices()
        if isinstance(found, Err):
            logger.error(f"Device discovery failed: {found.error}")
            return found

        accessories, id_errors = partition(self._init_unique(found.value))
        for error in id_errors:
            logger.warning(f"Failed to initialize accessory: {error}")

        removed = self.hub.remove_stale(a.uuid for a in accessories)

        logger.info(
            f"Discovery finished: {len(accessories)} accessories, "
            f"{len(decode_errors) + len(id_errors)} skipped, {len(removed)} removed"
        )
        return Ok(
            DiscoveryReport(
                accessories=accessories,
                errors=decode_errors + id_errors,
                removed=removed,
            )
        )


class DiscoveryRunner:
    """Serializes discovery cycles and remembers the latest outcome."""

    def __init__(self, pipeline: DiscoveryPipeline) -> None:
        self.pipeline = pipeline
        self.last_result: Result[DiscoveryReport, BridgeError] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_shut_down(self) -> bool:
        """True when the last cycle ended with a terminal error."""
        return isinstance(self.last_result, Err)

    async def run(self) -> Result[DiscoveryReport, BridgeError]:
        """Run a discovery cycle once any cycle in progress has finished."""
        async with self._lock:
            self.last_result = await self.pipeline.run()
            return self.last_result
