"""Loader for the device name filter.

Device names come from the DEVICES environment variable or, when that
is unset, from a YAML file:

    devices:
      - Kitchen Light
      - Samson's Light
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from alexa_bridge.models import Config

logger = logging.getLogger(__name__)


def load_device_names(config_path: Path) -> list[str] | None:
    """Read the ``devices`` list from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Configured names, or None when the file has no ``devices`` entry

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If ``devices`` is not a list of strings
    """
    logger.info(f"Loading device filter from: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid device config in {config_path}: expected a mapping")

    names = data.get("devices")
    if names is None:
        return None
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"Invalid device config in {config_path}: 'devices' must be a list of names")

    logger.info(f"Loaded device filter: {len(names)} names")
    return names


def resolve_device_names(config: Config) -> list[str] | None:
    """Pick the device filter from the environment or the YAML file.

    Args:
        config: Application configuration

    Returns:
        Configured names, or None for no filtering
    """
    if config.devices is not None:
        return config.devices
    if config.devices_config_path:
        return load_device_names(Path(config.devices_config_path))
    return None
