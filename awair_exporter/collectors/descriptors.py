"""
Metric descriptors for the Awair exporter.

A DescriptorSet is built once at startup and shared by reference with the
collector; it is never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from prometheus_client.core import GaugeMetricFamily

from ..const import METRIC_NAMESPACE

DEVICE_LABEL = "device_uuid"
INFO_LABELS = (DEVICE_LABEL, "firmware_version", "voc_feature_set")


@dataclass(frozen=True)
class MetricDescriptor:
    """
    Static metadata for one gauge family.

    ``field`` is the Readings attribute providing the value, or None for
    the constant-valued info gauge.
    """

    name: str
    documentation: str
    labels: tuple[str, ...] = (DEVICE_LABEL,)
    field: str | None = None

    @property
    def is_info(self) -> bool:
        return self.field is None

    def family(self) -> GaugeMetricFamily:
        """Create an empty gauge family for this descriptor."""
        return GaugeMetricFamily(self.name, self.documentation, labels=list(self.labels))


# (suffix, Readings field, help text), in emission order
_READING_GAUGES = (
    ("score", "score", "Awair Score (0-100)"),
    (
        "dew_point",
        "dew_point",
        "The temperature at which water will condense and form into dew (ºC)",
    ),
    ("temp", "temp", "Dry bulb temperature (ºC)"),
    ("humidity", "humid", "Relative Humidity (%)"),
    ("absolute_humidity", "abs_humid", "Absolute Humidity (g/m³)"),
    ("co2", "co2", "Carbon Dioxide (ppm)"),
    ("co2_est", "co2_est", "Estimated Carbon Dioxide (ppm - calculated by the TVOC sensor)"),
    (
        "co2_est_baseline",
        "co2_est_baseline",
        "A unitless value that represents the baseline from which the TVOC sensor "
        "partially derives its estimated (e)CO₂ output.",
    ),
    ("voc", "voc", "Total Volatile Organic Compounds (ppb)"),
    (
        "voc_baseline",
        "voc_baseline",
        "A unitless value that represents the baseline from which the TVOC sensor "
        "partially derives its TVOC output.",
    ),
    (
        "voc_h2_raw",
        "voc_h2_raw",
        "A unitless value that represents the Hydrogen gas signal from which the TVOC "
        "sensor partially derives its TVOC output.",
    ),
    (
        "voc_ethanol_raw",
        "voc_ethanol_raw",
        "A unitless value that represents the Ethanol gas signal from which the TVOC "
        "sensor partially derives its TVOC output.",
    ),
    ("pm25", "pm25", "Particulate matter less than 2.5 microns in diameter (µg/m³)"),
    (
        "pm10",
        "pm10_est",
        "Estimated particulate matter less than 10 microns in diameter "
        "(µg/m³ - calculated by the PM2.5 sensor)",
    ),
)


@dataclass(frozen=True)
class DescriptorSet:
    """Ordered, immutable collection of metric descriptors."""

    descriptors: tuple[MetricDescriptor, ...]

    def __iter__(self) -> Iterator[MetricDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    @property
    def gauges(self) -> tuple[MetricDescriptor, ...]:
        """Descriptors backed by a Readings field."""
        return tuple(d for d in self.descriptors if not d.is_info)

    @property
    def info(self) -> MetricDescriptor:
        """The device info descriptor."""
        for descriptor in self.descriptors:
            if descriptor.is_info:
                return descriptor
        raise LookupError("descriptor set has no info descriptor")


def build_descriptors(namespace: str = METRIC_NAMESPACE) -> DescriptorSet:
    """
    Build the descriptor set for all exported metrics.

    Args:
        namespace: Metric name prefix

    Returns:
        DescriptorSet with the reading gauges followed by the info gauge
    """
    descriptors = [
        MetricDescriptor(name=f"{namespace}_{suffix}", documentation=doc, field=attr)
        for suffix, attr, doc in _READING_GAUGES
    ]
    descriptors.append(
        MetricDescriptor(
            name=f"{namespace}_device_info",
            documentation="Info about the awair device",
            labels=INFO_LABELS,
        )
    )
    return DescriptorSet(tuple(descriptors))
