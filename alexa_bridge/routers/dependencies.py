"""Shared dependencies for API routers.

Services are created once in the application lifespan and stored on
``app.state``; these functions hand them to route handlers.
"""

from __future__ import annotations

from fastapi import Request

from alexa_bridge.hub import AccessoryRegistrar
from alexa_bridge.services.device_states import DeviceStateService
from alexa_bridge.services.discovery import DiscoveryRunner
from alexa_bridge.services.routines import RoutineService


def get_runner(request: Request) -> DiscoveryRunner:
    """Dependency to get the discovery runner."""
    return request.app.state.runner


def get_registrar(request: Request) -> AccessoryRegistrar:
    """Dependency to get the accessory registrar."""
    return request.app.state.registrar


def get_state_service(request: Request) -> DeviceStateService:
    """Dependency to get the device state service."""
    return request.app.state.state_service


def get_routine_service(request: Request) -> RoutineService:
    """Dependency to get the routine service."""
    return request.app.state.routine_service
