"""
Main application orchestrator.

Handles:
- Configuration loading
- Device reachability check and collector registration
- Prometheus HTTP endpoint
- Graceful shutdown
"""

import asyncio
import signal
from pathlib import Path
from threading import Thread
from wsgiref.simple_server import WSGIServer

from prometheus_client import (
    CollectorRegistry,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
    start_http_server,
)

from .collectors.awair import AwairCollector
from .collectors.descriptors import DescriptorSet, build_descriptors
from .config.loader import ConfigError, ConfigLoader
from .config.schema import Config
from .device.client import AwairClient
from .logging import LogConfig, get_logger, setup_logging

logger = get_logger("app")


class Application:
    """
    Main application class.

    Owns the metric registry, the Awair collector and the HTTP server
    that exposes them.
    """

    def __init__(self, config: Config):
        """
        Initialize application.

        Args:
            config: Application configuration
        """
        self.config = config

        # Built once, shared by reference with the collector
        self.descriptors: DescriptorSet = build_descriptors()

        self.client = AwairClient(
            config.device.host,
            timeout=config.device.timeout,
            user_agent=config.device.user_agent,
        )
        self.registry = CollectorRegistry()
        self.collector: AwairCollector | None = None

        self._server: WSGIServer | None = None
        self._thread: Thread | None = None
        self._shutdown_event = asyncio.Event()

    async def register(self) -> AwairCollector:
        """
        Create the collector and register it.

        The collector constructor blocks on a configuration fetch, so it
        runs in a worker thread.

        Raises:
            AwairError: If the device is unreachable
        """
        self.collector = await asyncio.to_thread(AwairCollector, self.client, self.descriptors)
        self.registry.register(self.collector)

        if self.config.exporter.process_metrics:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)

        return self.collector

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown."""
        loop = asyncio.get_running_loop()

        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, self._signal_handler)

    def _signal_handler(self) -> None:
        logger.info("Received shutdown signal")
        self._shutdown_event.set()

    async def start(self) -> None:
        """Start the application and block until shutdown."""
        logger.info(f"Starting Awair Exporter for device {self.config.device.host}")

        await self.register()

        listen = self.config.exporter.listen
        port = self.config.exporter.port
        self._server, self._thread = start_http_server(port, addr=listen, registry=self.registry)
        logger.info(f"Serving metrics on http://{listen}:{port}/metrics")

        self._setup_signal_handlers()
        await self._shutdown_event.wait()

        await self.stop()

    async def stop(self) -> None:
        """Stop the HTTP server."""
        logger.info("Stopping Awair Exporter")

        if self._server is not None:
            await asyncio.to_thread(self._server.shutdown)
            self._server.server_close()
            self._server = None

        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

        logger.info("Awair Exporter stopped")

    async def collect_once(self) -> str:
        """Register, run a single collection and return the text exposition."""
        await self.register()
        output = await asyncio.to_thread(generate_latest, self.registry)
        return output.decode()


def apply_overrides(
    config: Config,
    host: str | None = None,
    listen: str | None = None,
    port: int | None = None,
) -> Config:
    """Apply command-line overrides on top of file configuration."""
    if host:
        config.device.host = host
    if listen:
        config.exporter.listen = listen
    if port is not None:
        config.exporter.port = port
    return config


def load_app_config(
    config_path: str,
    host: str | None = None,
    listen: str | None = None,
    port: int | None = None,
) -> tuple[Config, list[str]]:
    """
    Load configuration, apply overrides and collect validation warnings.

    A missing config file is allowed when a device host is given on the
    command line; defaults are used for everything else.

    Raises:
        ConfigError: If the file is unusable
    """
    loader = ConfigLoader()

    if not Path(config_path).exists() and host:
        config = Config()
    else:
        config = loader.load_file(config_path)

    apply_overrides(config, host=host, listen=listen, port=port)
    return config, loader.validate(config)


def build_log_config(config: Config, cli_log_config: LogConfig | None) -> LogConfig:
    """Merge file logging settings with CLI logging settings."""
    file_cfg = config.logging

    if cli_log_config is None:
        return LogConfig(
            console_level=file_cfg.level,
            console_colors=file_cfg.colors,
            file_enabled=file_cfg.file is not None,
            file_path=file_cfg.file or LogConfig.file_path,
            file_level=file_cfg.file_level,
            file_max_bytes=file_cfg.file_max_size * 1024 * 1024,
            file_backup_count=file_cfg.file_keep,
            format=file_cfg.format,
        )

    # CLI args override file config, but file settings fill what the CLI left out
    if not cli_log_config.file_enabled and file_cfg.file:
        cli_log_config.file_enabled = True
        cli_log_config.file_path = file_cfg.file
        cli_log_config.file_level = file_cfg.file_level
        cli_log_config.file_max_bytes = file_cfg.file_max_size * 1024 * 1024
        cli_log_config.file_backup_count = file_cfg.file_keep
    return cli_log_config


async def run_app(
    config_path: str,
    cli_log_config: LogConfig | None = None,
    host: str | None = None,
    listen: str | None = None,
    port: int | None = None,
) -> None:
    """
    Load configuration and run the application.

    Args:
        config_path: Path to configuration file
        cli_log_config: Logging config from CLI args (overrides file config)
        host: Device host override
        listen: Listen address override
        port: Listen port override
    """
    config, warnings = load_app_config(config_path, host=host, listen=listen, port=port)
    setup_logging(build_log_config(config, cli_log_config))

    logger.debug(f"Device: {config.device.host} (timeout {config.device.timeout}s)")
    for warning in warnings:
        logger.warning(f"Config warning: {warning}")

    require_host(config)

    app = Application(config)
    await app.start()


def require_host(config: Config) -> None:
    """Raise ConfigError if no device host is configured."""
    if not config.device.host:
        raise ConfigError("No device host configured (set 'host' in the device block or --host)")
