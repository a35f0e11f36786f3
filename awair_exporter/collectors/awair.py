"""
Prometheus collector for an Awair device.

On every scrape the readings and the configuration are fetched
concurrently, then one gauge per reading plus a device info gauge are
emitted. A failed fetch is logged and replaced by zero values so a scrape
always gets a full response.
"""

import asyncio
from typing import Any

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

from ..device.client import AwairClient
from ..logging import get_logger
from .base import CycleResult
from .descriptors import DescriptorSet, build_descriptors

logger = get_logger("collectors.awair")


class AwairCollector(Collector):
    """
    Collector exposing Awair readings as gauges.

    Construction performs one configuration fetch and raises if the device
    is unreachable, so a collector only exists for a reachable device.
    """

    def __init__(self, client: AwairClient, descriptors: DescriptorSet | None = None):
        """
        Initialize collector.

        Args:
            client: Device client
            descriptors: Shared descriptor set (built with defaults if None)

        Raises:
            AwairError: If the initial configuration fetch fails
        """
        self.client = client
        self.descriptors = descriptors if descriptors is not None else build_descriptors()

        config = asyncio.run(client.fetch_configuration())
        logger.info(
            f"Successfully connected to Awair device at {client.host} "
            f"(uuid={config.device_uuid!r}, firmware={config.fw_version!r})"
        )
        logger.debug(f"Device configuration: {config}")

    def describe(self) -> list[GaugeMetricFamily]:
        """Return metric metadata without contacting the device."""
        return [descriptor.family() for descriptor in self.descriptors]

    async def fetch(self) -> CycleResult:
        """
        Fetch readings and configuration concurrently.

        Both requests always run to completion; a failure in one does not
        cancel the other.
        """
        result = CycleResult()
        async with self.client.session() as session:
            readings, configuration = await asyncio.gather(
                self.client.fetch_readings(session),
                self.client.fetch_configuration(session),
                return_exceptions=True,
            )

        if self._check("readings", readings, result):
            result.readings = readings
            logger.debug(f"Readings successfully retrieved: {readings}")
        if self._check("configuration", configuration, result):
            result.configuration = configuration
            logger.debug(f"Configuration successfully retrieved: {configuration}")

        return result

    @staticmethod
    def _check(resource: str, outcome: Any, result: CycleResult) -> bool:
        """Log and record a failed fetch. Returns True if the fetch succeeded."""
        if not isinstance(outcome, BaseException):
            return True
        if not isinstance(outcome, Exception):
            raise outcome
        logger.error(f"Error retrieving {resource} from device: {outcome}")
        result.set_error(resource, outcome)
        return False

    def emit(self, result: CycleResult) -> list[GaugeMetricFamily]:
        """Build gauge families from a cycle result. Never raises."""
        readings = result.readings_or_default()
        config = result.configuration_or_default()
        device_uuid = config.device_uuid

        families = []
        for descriptor in self.descriptors.gauges:
            family = descriptor.family()
            family.add_metric([device_uuid], getattr(readings, descriptor.field))
            families.append(family)

        # Unknown configuration leaves every info label empty, including the feature set
        feature_set = str(config.voc_feature_set) if result.configuration is not None else ""
        info = self.descriptors.info.family()
        info.add_metric([device_uuid, config.fw_version, feature_set], 1)
        families.append(info)

        return families

    def collect(self) -> list[GaugeMetricFamily]:
        """
        Fetch current values and return one family per descriptor.

        Runs its own event loop, so it must be called from a thread with no
        running loop (the exporter's HTTP server thread, or via
        ``asyncio.to_thread`` from async code).
        """
        return self.emit(asyncio.run(self.fetch()))

    def __repr__(self) -> str:
        return f"AwairCollector({self.client.host!r}, {len(self.descriptors)} metrics)"
