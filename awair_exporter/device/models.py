"""
Data models for the Awair Local API.

Payloads are decoded leniently on presence (missing or null keys keep their
zero value, unknown keys are ignored) and strictly on type (a field holding
the wrong JSON type is rejected with ValueError). Object keys are matched
case-insensitively, with an exact-case key winning over a folded one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any


def _require_object(data: Any, what: str) -> dict[str, Any]:
    """Check that data is a JSON object and return it with lowercased keys."""
    if not isinstance(data, dict):
        raise ValueError(f"{what}: expected JSON object, got {type(data).__name__}")
    folded: dict[str, Any] = {}
    for key, value in data.items():
        lowered = str(key).lower()
        if key == lowered or lowered not in folded:
            folded[lowered] = value
    return folded


def _float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key}: expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError:
        raise ValueError(f"{key}: number out of range") from None
    # json accepts NaN/Infinity tokens and overflows 1e400 to inf
    if not math.isfinite(number):
        raise ValueError(f"{key}: number out of range")
    return number


def _int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"{key}: expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{key}: expected integer, got {value!r}")


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected string, got {type(value).__name__}")
    return value


@dataclass
class Readings:
    """
    Latest sensor readings (``GET /air-data/latest``).

    Field names follow the JSON keys of the device payload.
    """

    score: float = 0.0
    dew_point: float = 0.0
    temp: float = 0.0
    humid: float = 0.0
    abs_humid: float = 0.0
    co2: float = 0.0
    co2_est: float = 0.0
    co2_est_baseline: float = 0.0
    voc: float = 0.0
    voc_baseline: float = 0.0
    voc_h2_raw: float = 0.0
    voc_ethanol_raw: float = 0.0
    pm25: float = 0.0
    pm10_est: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Readings:
        """
        Decode a readings payload.

        Raises:
            ValueError: If the payload does not match the readings shape
        """
        data = _require_object(data, "readings")
        return cls(**{f.name: _float(data, f.name) for f in fields(cls)})


@dataclass
class LEDSettings:
    """LED mode and brightness."""

    mode: str = ""
    brightness: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> LEDSettings:
        """Decode the ``led`` object."""
        if data is None:
            return cls()
        data = _require_object(data, "led")
        return cls(
            mode=_str(data, "mode"),
            brightness=_int(data, "brightness"),
        )


@dataclass
class DeviceConfiguration:
    """Device settings (``GET /settings/config/data``)."""

    device_uuid: str = ""
    wifi_mac: str = ""
    ssid: str = ""
    ip: str = ""
    netmask: str = ""
    gateway: str = ""
    fw_version: str = ""
    timezone: str = ""
    display: str = ""
    led: LEDSettings = field(default_factory=LEDSettings)
    voc_feature_set: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> DeviceConfiguration:
        """
        Decode a configuration payload.

        Raises:
            ValueError: If the payload does not match the configuration shape
        """
        data = _require_object(data, "configuration")
        return cls(
            device_uuid=_str(data, "device_uuid"),
            wifi_mac=_str(data, "wifi_mac"),
            ssid=_str(data, "ssid"),
            ip=_str(data, "ip"),
            netmask=_str(data, "netmask"),
            gateway=_str(data, "gateway"),
            fw_version=_str(data, "fw_version"),
            timezone=_str(data, "timezone"),
            display=_str(data, "display"),
            led=LEDSettings.from_dict(data.get("led")),
            voc_feature_set=_int(data, "voc_feature_set"),
        )
