"""Error taxonomy for the Alexa bridge.

Errors are exceptions so they carry a message and a traceback-friendly
repr, but they are returned inside ``Err`` values rather than raised
across component boundaries.
"""

from __future__ import annotations

from typing import Any


class BridgeError(Exception):
    """Base error for the Alexa bridge.

    Two errors are equal when they have the same type and message, so
    results carrying them can be compared directly in tests and logs.
    """

    def __init__(self, message: str) -> None:
        """Initialize bridge error.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class AlexaApiError(BridgeError):
    """Raised for problems talking to the Alexa account."""

    pass


class InvalidResponse(AlexaApiError):
    """The Alexa payload is missing or structurally wrong."""

    pass


class HttpError(AlexaApiError):
    """Transport failure calling the Alexa API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize HTTP error.

        Args:
            message: Error description
            status_code: HTTP status code, when a response was received
        """
        self.status_code = status_code
        super().__init__(message)


class HubError(BridgeError):
    """Raised for problems on the home-automation hub side."""

    pass


class ValidationError(HubError):
    """A domain rule was violated (nothing configured, bad device id)."""

    pass
