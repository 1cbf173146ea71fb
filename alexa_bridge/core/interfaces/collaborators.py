"""Collaborator protocol definitions.

The discovery pipeline never talks HTTP or hub internals directly. It
depends on these narrow interfaces, so the Alexa client and the accessory
registrar can be swapped for mocks in tests.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from alexa_bridge.core.errors import HttpError
from alexa_bridge.core.models import Accessory, SmartHomeDevice
from alexa_bridge.core.result import Result


@runtime_checkable
class AlexaApi(Protocol):
    """Remote Alexa account API.

    Every call resolves to the raw, not yet validated JSON body or to an
    ``HttpError``; nothing is raised.

    Example Implementation:
        >>> class StaticAlexaApi:
        ...     async def get_devices(self) -> Result[Any, HttpError]:
        ...         return Ok([])
        ...
        ...     async def get_device_states(self, device_ids):
        ...         return Ok({"deviceStates": [], "errors": []})
        ...
        ...     async def get_routines(self):
        ...         return Ok([])
    """

    @abstractmethod
    async def get_devices(self) -> Result[Any, HttpError]:
        """List the smart-home devices of the account.

        Returns:
            Raw device payload or transport error
        """
        ...

    @abstractmethod
    async def get_device_states(self, device_ids: list[str]) -> Result[Any, HttpError]:
        """Query capability states of the given devices.

        Args:
            device_ids: Alexa device ids

        Returns:
            Raw state payload or transport error
        """
        ...

    @abstractmethod
    async def get_routines(self) -> Result[Any, HttpError]:
        """List the routines of the account."""
        ...


@runtime_checkable
class AccessoryHub(Protocol):
    """Hub-side accessory registration."""

    @abstractmethod
    def is_valid_id(self, device_id: str) -> bool:
        """Check a device id against the hub's accessory-identifier rules."""
        ...

    @abstractmethod
    def register(self, device: SmartHomeDevice) -> Accessory:
        """Register a validated device, reusing the accessory of an earlier cycle."""
        ...

    @abstractmethod
    def remove_stale(self, keep_ids: Iterable[str]) -> list[Accessory]:
        """Unregister accessories whose id is not in keep_ids."""
        ...
