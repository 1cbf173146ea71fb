"""Filtering of discovered devices against configured display names."""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable, Sequence

from alexa_bridge.core.errors import ValidationError
from alexa_bridge.core.models import SmartHomeDevice
from alexa_bridge.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

NO_DEVICES_CONFIGURED = "No Alexa devices configured. Shutting down plugin"

# Typographic quotes the Alexa app inserts into names
_QUOTE_FOLDING = str.maketrans({
    "‘": "'",
    "’": "'",
    "‛": "'",
    "′": "'",
    "“": '"',
    "”": '"',
})


def normalize_name(name: str) -> str:
    """Normalize a display name for comparison.

    Applies NFKC, folds curly quotes to ASCII, trims surrounding
    whitespace and casefolds.

    Examples:
        >>> normalize_name(" Samson’s Light  ")
        "samson's light"
    """
    normalized = unicodedata.normalize("NFKC", name).translate(_QUOTE_FOLDING)
    return normalized.strip().casefold()


def filter_devices(
    devices: Sequence[SmartHomeDevice],
    device_names: Iterable[str] | None,
) -> Result[list[SmartHomeDevice], ValidationError]:
    """Select the devices to expose as accessories.

    Groups are never exposed, even when their name is configured. An
    absent or empty name list keeps every non-group device.

    Args:
        devices: Decoded devices in payload order
        device_names: Configured display names, or None for all

    Returns:
        Ok with the kept devices in input order, or Err(ValidationError)
        when nothing is left
    """
    controllable = [d for d in devices if not d.is_group]

    wanted = {normalize_name(n) for n in device_names or []}
    if wanted:
        kept = [d for d in controllable if normalize_name(d.display_name) in wanted]
    else:
        kept = controllable

    logger.debug(
        f"Device filter kept {len(kept)} of {len(devices)} devices "
        f"({len(devices) - len(controllable)} groups excluded)"
    )

    if not kept:
        return Err(ValidationError(NO_DEVICES_CONFIGURED))
    return Ok(kept)
