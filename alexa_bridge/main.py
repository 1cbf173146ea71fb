"""Alexa bridge FastAPI application.

Discovers the smart-home devices of an Alexa account on startup and
exposes them as hub accessories.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TextIO

from fastapi import FastAPI
from pythonjsonlogger import jsonlogger

from alexa_bridge.core.result import Err
from alexa_bridge.hub import AccessoryRegistrar
from alexa_bridge.models import Config
from alexa_bridge.routers import devices, health, routines
from alexa_bridge.services.alexa_client import AlexaApiClient
from alexa_bridge.services.config_loader import resolve_device_names
from alexa_bridge.services.device_states import DeviceStateService
from alexa_bridge.services.discovery import DiscoveryPipeline, DiscoveryRunner
from alexa_bridge.services.routines import RoutineService

LOG_FORMAT = "%(name)s %(levelname)s %(message)s"
LOG_HANDLER_NAME = "alexa_bridge.json"
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Route root logging through a single JSON handler.

    Records carry ``timestamp``, ``logger``, ``level`` and ``message`` keys
    plus any ``extra`` fields. A handler installed by an earlier call is
    replaced, so restarting the app in one process does not duplicate lines.

    Args:
        log_level: Logging level name, case-insensitive
        stream: Output stream, stdout when omitted

    Returns:
        The installed handler
    """
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == LOG_HANDLER_NAME:
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(
        jsonlogger.JsonFormatter(  # type: ignore[attr-defined]
            LOG_FORMAT,
            timestamp=True,
            rename_fields={"levelname": "level", "name": "logger"},
        )
    )
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager.

    Builds the services and runs the first discovery cycle. A terminal
    discovery error leaves the bridge running but shut down.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    config = Config()
    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    logger.info("Alexa bridge starting up")
    logger.info(f"Alexa URL: {config.alexa_base_url}")

    device_names = resolve_device_names(config)
    if device_names:
        logger.info(f"Device filter: {', '.join(device_names)}")
    else:
        logger.info("No device filter configured, exposing all devices")

    alexa_api = AlexaApiClient(config)
    registrar = AccessoryRegistrar()
    runner = DiscoveryRunner(DiscoveryPipeline(alexa_api, registrar, device_names))

    app.state.registrar = registrar
    app.state.runner = runner
    app.state.state_service = DeviceStateService(alexa_api)
    app.state.routine_service = RoutineService(alexa_api)

    result = await runner.run()
    if isinstance(result, Err):
        logger.error(f"Alexa bridge shut down: {result.error.message}")

    yield

    logger.info("Alexa bridge shutting down")


app = FastAPI(
    title="Alexa Bridge",
    description="Exposes Alexa smart-home devices as home-automation accessories",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(devices.router)
app.include_router(routines.router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint.

    Returns:
        Welcome message with API info
    """
    return {
        "message": "Alexa Bridge",
        "version": "0.1.0",
        "docs": "/docs",
    }
