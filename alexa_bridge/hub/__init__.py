"""Home-automation hub side of the bridge."""

from alexa_bridge.hub.registrar import AccessoryRegistrar

__all__ = ["AccessoryRegistrar"]
