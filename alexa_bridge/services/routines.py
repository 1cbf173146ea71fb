"""Routine listing for the Alexa account."""

from __future__ import annotations

import logging
from typing import Any

from alexa_bridge.core.errors import BridgeError
from alexa_bridge.core.interfaces import AlexaApi
from alexa_bridge.core.result import Result
from alexa_bridge.validation import validate_routine_list

logger = logging.getLogger(__name__)


class RoutineService:
    """Fetches the routines of the account as an unvalidated list."""

    def __init__(self, alexa_api: AlexaApi) -> None:
        self.alexa_api = alexa_api

    async def get_routines(self) -> Result[list[Any], BridgeError]:
        """List routines.

        Only the outer shape is checked; routine records are passed
        through as returned by Alexa.

        Returns:
            Ok with the routine records, or the transport or shape error
        """
        fetched = await self.alexa_api.get_routines()
        result = fetched.and_then(validate_routine_list)
        if result.is_ok():
            logger.debug(f"Fetched {len(result.unwrap())} routines")
        return result
