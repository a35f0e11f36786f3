"""
Application constants and metadata.
"""

# Application info
APP_NAME = "Awair Exporter"
APP_VERSION = "0.1.0"
APP_URL = "https://github.com/awair-exporter/awair-exporter"

# Metric namespace (prefix for every exposed metric)
METRIC_NAMESPACE = "awair"

# Device Local API paths
READINGS_PATH = "/air-data/latest"
CONFIGURATION_PATH = "/settings/config/data"

# Default values
DEFAULT_CONFIG_PATH = "/etc/awair-exporter/config.conf"
DEFAULT_LISTEN_ADDRESS = "0.0.0.0"
DEFAULT_PORT = 9185
DEFAULT_TIMEOUT = 5.0
DEFAULT_USER_AGENT = f"awair-exporter/{APP_VERSION}"
