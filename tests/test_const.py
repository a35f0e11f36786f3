"""
Tests for constants.
"""

import awair_exporter
from awair_exporter.const import APP_NAME, APP_VERSION, CONFIGURATION_PATH, READINGS_PATH


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "Awair Exporter"
    assert awair_exporter.__version__ == APP_VERSION


def test_device_paths():
    assert READINGS_PATH == "/air-data/latest"
    assert CONFIGURATION_PATH == "/settings/config/data"
