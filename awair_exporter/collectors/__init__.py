"""
Prometheus collectors for Awair devices.
"""

from .awair import AwairCollector
from .base import CycleResult
from .descriptors import DescriptorSet, MetricDescriptor, build_descriptors

__all__ = [
    "AwairCollector",
    "CycleResult",
    "DescriptorSet",
    "MetricDescriptor",
    "build_descriptors",
]
