"""
Awair Local API client.

Provides async access to the two read-only endpoints of an Awair device:
the latest air readings and the device configuration. Requests are made
with httpx and are single-attempt: errors are raised to the caller, never
retried here.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from ..const import CONFIGURATION_PATH, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, READINGS_PATH
from ..logging import get_logger
from .models import DeviceConfiguration, Readings

logger = get_logger("device.client")


class AwairError(Exception):
    """Base exception for device communication errors."""


class TransportError(AwairError):
    """Network, DNS, connection or timeout failure."""


class DeviceHTTPError(TransportError):
    """Device answered with an HTTP error status."""

    def __init__(self, status: int, url: str):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} from {url}")


class DecodeError(AwairError):
    """Response body is not JSON or does not match the expected shape."""


class AwairClient:
    """
    Async client for the Awair Local API.

    Usage:
        client = AwairClient("192.168.1.50")
        async with client.session() as session:
            readings = await client.fetch_readings(session)
            config = await client.fetch_configuration(session)
    """

    def __init__(
        self,
        host: str,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Awair client.

        Args:
            host: Device hostname or IP, optionally with ":port"
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header sent to the device
            transport: Custom httpx transport (used by tests)
        """
        self.host = host
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    @property
    def base_url(self) -> str:
        """Base URL of the device API."""
        return f"http://{self.host}"

    def session(self) -> httpx.AsyncClient:
        """Create an HTTP session bound to the device."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        )

    @asynccontextmanager
    async def _use_session(
        self, session: httpx.AsyncClient | None
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the given session, or a temporary one closed afterwards."""
        if session is not None:
            yield session
            return
        async with self.session() as own:
            yield own

    async def _get_json(self, path: str, session: httpx.AsyncClient | None) -> Any:
        """
        GET request returning decoded JSON.

        Raises:
            TransportError: On network failure, invalid host or HTTP error status
            DecodeError: If the body cannot be decompressed or is not valid JSON
        """
        url = f"{self.base_url}{path}"
        try:
            async with self._use_session(session) as client:
                response = await client.get(path)
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable response from {url}: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"GET {url} failed: {e!r}") from e
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid device address {self.host!r}: {e}") from e

        if response.status_code >= 400:
            raise DeviceHTTPError(response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON from {url}: {e}") from e

    async def fetch_readings(self, session: httpx.AsyncClient | None = None) -> Readings:
        """
        Fetch the latest air readings.

        Args:
            session: Optional shared HTTP session

        Returns:
            Readings

        Raises:
            TransportError: If the device cannot be reached
            DecodeError: If the payload is malformed
        """
        logger.debug(f"Retrieving readings from {self.base_url}{READINGS_PATH}")
        data = await self._get_json(READINGS_PATH, session)
        try:
            return Readings.from_dict(data)
        except ValueError as e:
            raise DecodeError(f"Unexpected readings payload: {e}") from e

    async def fetch_configuration(
        self, session: httpx.AsyncClient | None = None
    ) -> DeviceConfiguration:
        """
        Fetch the device configuration.

        Args:
            session: Optional shared HTTP session

        Returns:
            DeviceConfiguration

        Raises:
            TransportError: If the device cannot be reached
            DecodeError: If the payload is malformed
        """
        logger.debug(f"Retrieving configuration from {self.base_url}{CONFIGURATION_PATH}")
        data = await self._get_json(CONFIGURATION_PATH, session)
        try:
            return DeviceConfiguration.from_dict(data)
        except ValueError as e:
            raise DecodeError(f"Unexpected configuration payload: {e}") from e

    def __repr__(self) -> str:
        return f"AwairClient({self.host!r}, timeout={self.timeout}s)"
