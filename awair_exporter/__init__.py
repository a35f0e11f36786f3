"""
Awair Exporter - Prometheus exporter for Awair air quality monitors.

Polls the Awair Local API and exposes sensor readings as Prometheus gauges.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
