"""Alexa smart-home bridge.

Discovers the devices of an Alexa account, validates and filters them,
and registers them as home-automation accessories.
"""

__version__ = "0.1.0"
