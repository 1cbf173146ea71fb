"""Bridge services: Alexa client, device filtering, discovery and state."""
