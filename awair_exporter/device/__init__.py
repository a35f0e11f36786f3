"""
Awair Local API client and payload models.
"""

from .client import AwairClient, AwairError, DecodeError, DeviceHTTPError, TransportError
from .models import DeviceConfiguration, LEDSettings, Readings

__all__ = [
    "AwairClient",
    "AwairError",
    "TransportError",
    "DeviceHTTPError",
    "DecodeError",
    "Readings",
    "LEDSettings",
    "DeviceConfiguration",
]
