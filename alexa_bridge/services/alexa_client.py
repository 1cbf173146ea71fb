"""HTTP client for the Alexa web API.

Authenticates with the cookie of a logged-in Alexa web session. Every
method returns the decoded JSON body in ``Ok`` or an ``HttpError`` in
``Err``; transport exceptions never escape.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from alexa_bridge.core.errors import HttpError
from alexa_bridge.core.models import APPLIANCE_CATEGORY
from alexa_bridge.core.result import Err, Ok, Result
from alexa_bridge.models import Config

logger = logging.getLogger(__name__)

SMART_HOME_SKILL_ID = "amzn1.ask.1p.smarthome"
DEVICES_PATH = "/api/behaviors/entities"
DEVICE_STATES_PATH = "/api/phoenix/state"
ROUTINES_PATH = "/api/behaviors/v2/automations"

_CSRF_COOKIE = re.compile(r"(?:^|;\s*)csrf=([^;]+)")


class AlexaApiClient:
    """Client for the Alexa smart-home endpoints."""

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize Alexa client.

        Args:
            config: Application configuration
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = config.alexa_base_url
        self.cookie = config.alexa_cookie
        self.timeout = config.alexa_timeout
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        """Build request headers.

        Returns:
            Headers with cookie auth and the csrf token, when present
        """
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Cookie": self.cookie,
        }
        match = _CSRF_COOKIE.search(self.cookie)
        if match:
            headers["csrf"] = match.group(1)
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Result[Any, HttpError]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    path,
                    params=params,
                    json=json,
                    headers=self._get_headers(),
                )
                response.raise_for_status()

            return Ok(response.json())

        except httpx.TimeoutException:
            logger.error(f"Timeout calling Alexa {path} (>{self.timeout}s)")
            return Err(HttpError(f"Timeout calling Alexa API: {path}"))

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"Alexa API returned HTTP {status_code} for {path}")
            return Err(
                HttpError(f"Alexa API returned HTTP {status_code}: {path}", status_code=status_code)
            )

        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling Alexa: {type(e).__name__}: {e}")
            return Err(HttpError(f"Error calling Alexa API: {e}"))

        except ValueError as e:
            logger.error(f"Alexa API returned a non-JSON body for {path}: {e}")
            return Err(HttpError(f"Invalid JSON from Alexa API: {path}"))

    async def get_devices(self) -> Result[Any, HttpError]:
        """List the smart-home entities of the account."""
        logger.debug("Fetching Alexa smart-home devices")
        return await self._request("GET", DEVICES_PATH, params={"skillId": SMART_HOME_SKILL_ID})

    async def get_device_states(self, device_ids: list[str]) -> Result[Any, HttpError]:
        """Query capability states of the given devices.

        Args:
            device_ids: Alexa device ids

        Returns:
            Raw state payload or transport error
        """
        logger.debug(f"Fetching states for {len(device_ids)} devices")
        body = {
            "stateRequests": [
                {"entityId": device_id, "entityType": APPLIANCE_CATEGORY}
                for device_id in device_ids
            ]
        }
        return await self._request("POST", DEVICE_STATES_PATH, json=body)

    async def get_routines(self) -> Result[Any, HttpError]:
        """List the routines of the account."""
        return await self._request("GET", ROUTINES_PATH)
