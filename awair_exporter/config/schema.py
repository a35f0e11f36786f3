"""
Configuration schema with dataclasses for validation and type safety.
"""

from dataclasses import dataclass, field

from ..const import (
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from .parser import Block, ConfigDocument


@dataclass
class DeviceConfig:
    """Awair device connection settings."""

    host: str = ""
    timeout: float = DEFAULT_TIMEOUT  # Per-request timeout in seconds
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_block(cls, block: Block | None) -> "DeviceConfig":
        """Create DeviceConfig from a parsed 'device' block."""
        if block is None:
            return cls()

        return cls(
            host=str(block.get_value("host", "")),
            timeout=float(block.get_value("timeout", DEFAULT_TIMEOUT)),
            user_agent=str(block.get_value("user_agent", DEFAULT_USER_AGENT)),
        )


@dataclass
class ExporterConfig:
    """Metrics HTTP endpoint settings."""

    listen: str = DEFAULT_LISTEN_ADDRESS
    port: int = DEFAULT_PORT
    process_metrics: bool = True  # Also expose exporter process/platform metrics

    @classmethod
    def from_block(cls, block: Block | None) -> "ExporterConfig":
        """Create ExporterConfig from a parsed 'exporter' block."""
        if block is None:
            return cls()

        return cls(
            listen=str(block.get_value("listen", DEFAULT_LISTEN_ADDRESS)),
            port=int(block.get_value("port", DEFAULT_PORT)),
            process_metrics=bool(block.get_value("process_metrics", True)),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "info"  # debug, info, warning, error
    file: str | None = None  # Log file path
    file_level: str = "debug"
    file_max_size: int = 10  # Max file size in MB
    file_keep: int = 5  # Number of backup files to keep
    colors: bool = True
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    @classmethod
    def from_block(cls, block: Block | None) -> "LoggingConfig":
        """Create LoggingConfig from a parsed 'logging' block."""
        if block is None:
            return cls()

        defaults = cls()
        return cls(
            level=str(block.get_value("level", defaults.level)),
            file=block.get_value("file"),
            file_level=str(block.get_value("file_level", defaults.file_level)),
            file_max_size=int(block.get_value("file_max_size", defaults.file_max_size)),
            file_keep=int(block.get_value("file_keep", defaults.file_keep)),
            colors=bool(block.get_value("colors", defaults.colors)),
            format=str(block.get_value("format", defaults.format)),
        )


@dataclass
class Config:
    """Root configuration."""

    device: DeviceConfig = field(default_factory=DeviceConfig)
    exporter: ExporterConfig = field(default_factory=ExporterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_document(cls, document: ConfigDocument) -> "Config":
        """Create Config from a parsed document."""
        return cls(
            device=DeviceConfig.from_block(document.get_block("device")),
            exporter=ExporterConfig.from_block(document.get_block("exporter")),
            logging=LoggingConfig.from_block(document.get_block("logging")),
        )
