"""
Tests for Awair payload decoding.
"""

import pytest

from awair_exporter.device.models import DeviceConfiguration, LEDSettings, Readings


def test_readings_from_full_payload(readings_body) -> None:
    readings = Readings.from_dict(readings_body)

    assert readings.score == 85.0
    assert readings.humid == 40.2
    assert readings.pm10_est == 5.0
    assert isinstance(readings.co2, float)


def test_readings_missing_and_null_fields_are_zero() -> None:
    readings = Readings.from_dict({"score": 70, "temp": None, "unknown_field": "x"})

    assert readings.score == 70.0
    assert readings.temp == 0.0
    assert readings.voc == 0.0


@pytest.mark.parametrize(
    "value", ["85", True, [1], {"v": 1}, 10**400, float("nan"), float("inf"), float("-inf")]
)
def test_readings_reject_non_numeric(value) -> None:
    with pytest.raises(ValueError, match="score"):
        Readings.from_dict({"score": value})


def test_readings_reject_non_object(readings_body) -> None:
    with pytest.raises(ValueError, match="expected JSON object"):
        Readings.from_dict([readings_body])


def test_configuration_full_payload() -> None:
    config = DeviceConfiguration.from_dict(
        {
            "device_uuid": "awair-element_1234",
            "wifi_mac": "70:88:6B:00:00:01",
            "ssid": "home",
            "ip": "192.168.1.50",
            "netmask": "255.255.255.0",
            "gateway": "192.168.1.1",
            "fw_version": "1.4.0",
            "timezone": "Europe/Berlin",
            "display": "score",
            "led": {"mode": "auto", "brightness": 179},
            "voc_feature_set": 34,
        }
    )

    assert config.device_uuid == "awair-element_1234"
    assert config.ip == "192.168.1.50"
    assert config.led == LEDSettings(mode="auto", brightness=179)
    assert config.voc_feature_set == 34


def test_configuration_partial_payload_defaults() -> None:
    config = DeviceConfiguration.from_dict({"device_uuid": "awair-123"})

    assert config.fw_version == ""
    assert config.led == LEDSettings()
    assert config.voc_feature_set == 0


def test_led_keys_are_case_insensitive() -> None:
    led = LEDSettings.from_dict({"Mode": "manual", "Brightness": 20})

    assert led.mode == "manual"
    assert led.brightness == 20


def test_voc_feature_set_accepts_integral_float() -> None:
    assert DeviceConfiguration.from_dict({"voc_feature_set": 3.0}).voc_feature_set == 3


@pytest.mark.parametrize("value", [3.5, "3", False])
def test_voc_feature_set_rejects_non_integer(value) -> None:
    with pytest.raises(ValueError, match="voc_feature_set"):
        DeviceConfiguration.from_dict({"voc_feature_set": value})


def test_configuration_rejects_non_string_uuid() -> None:
    with pytest.raises(ValueError, match="device_uuid"):
        DeviceConfiguration.from_dict({"device_uuid": 123})


def test_top_level_keys_are_case_insensitive() -> None:
    readings = Readings.from_dict({"Score": 90, "CO2": 500})
    config = DeviceConfiguration.from_dict({"Device_UUID": "awair-9", "Fw_Version": "2.0"})

    assert readings.score == 90.0
    assert readings.co2 == 500.0
    assert config.device_uuid == "awair-9"
    assert config.fw_version == "2.0"


def test_exact_case_key_wins() -> None:
    assert Readings.from_dict({"score": 10, "SCORE": 20}).score == 10.0
    assert Readings.from_dict({"SCORE": 20, "score": 10}).score == 10.0
