"""Validators for raw Alexa API payloads."""

from alexa_bridge.validation.response import (
    decode_capability_states,
    decode_device,
    validate_device_list,
    validate_device_states,
    validate_routine_list,
)

__all__ = [
    "decode_capability_states",
    "decode_device",
    "validate_device_list",
    "validate_device_states",
    "validate_routine_list",
]
