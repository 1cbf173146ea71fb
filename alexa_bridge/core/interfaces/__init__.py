"""Protocols for the collaborators the discovery pipeline consumes."""

from alexa_bridge.core.interfaces.collaborators import AccessoryHub, AlexaApi

__all__ = ["AccessoryHub", "AlexaApi"]
