"""
Pytest configuration and fixtures.
"""

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from awair_exporter.const import CONFIGURATION_PATH, READINGS_PATH
from awair_exporter.device.client import AwairClient

READINGS_BODY = {
    "score": 85,
    "dew_point": 12.3,
    "temp": 21.5,
    "humid": 40.2,
    "abs_humid": 7.1,
    "co2": 612,
    "co2_est": 600,
    "co2_est_baseline": 4200,
    "voc": 250,
    "voc_baseline": 18000,
    "voc_h2_raw": 12500,
    "voc_ethanol_raw": 18800,
    "pm25": 3,
    "pm10_est": 5,
}

CONFIG_BODY = {"device_uuid": "awair-123", "fw_version": "1.2.3", "voc_feature_set": 3}


def _respond(spec: Any, request: httpx.Request) -> httpx.Response:
    if isinstance(spec, Exception):
        raise spec
    if isinstance(spec, httpx.Response):
        return spec
    if isinstance(spec, bytes):
        return httpx.Response(200, content=spec)
    return httpx.Response(200, json=spec)


class FakeDevice:
    """
    Simulated Awair Local API.

    Each endpoint answers with a JSON body (dict), raw bytes, an
    httpx.Response, or raises the given exception. Responses can be delayed.
    """

    def __init__(
        self,
        readings: Any = None,
        configuration: Any = None,
        readings_delay: float = 0.0,
        configuration_delay: float = 0.0,
    ):
        self.readings = READINGS_BODY if readings is None else readings
        self.configuration = CONFIG_BODY if configuration is None else configuration
        self.readings_delay = readings_delay
        self.configuration_delay = configuration_delay
        self.requests: list[httpx.Request] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == READINGS_PATH:
            await asyncio.sleep(self.readings_delay)
            return _respond(self.readings, request)
        if request.url.path == CONFIGURATION_PATH:
            await asyncio.sleep(self.configuration_delay)
            return _respond(self.configuration, request)
        return httpx.Response(404, text="not found")

    def client(self, host: str = "awair.local") -> AwairClient:
        return AwairClient(host, timeout=2.0, transport=httpx.MockTransport(self.handler))

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_device() -> Callable[..., FakeDevice]:
    """Factory for simulated devices."""
    return FakeDevice


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example config file shipped with the project."""
    return Path(__file__).parent.parent / "config.example.conf"


@pytest.fixture
def readings_body() -> dict[str, Any]:
    return dict(READINGS_BODY)


@pytest.fixture
def config_body() -> dict[str, Any]:
    return dict(CONFIG_BODY)
