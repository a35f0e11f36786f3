"""
Entry point for Awair Exporter.

Usage:
    python -m awair_exporter /path/to/config.conf
    python -m awair_exporter --host 192.168.1.50
    python -m awair_exporter --help
"""

import argparse
import asyncio
import sys

from . import __version__
from .app import Application, load_app_config, require_host, run_app
from .config.loader import ConfigError
from .const import DEFAULT_CONFIG_PATH
from .device.client import AwairError
from .logging import LogConfig, get_logger, setup_logging

logger = get_logger("main")


def validate_config(args: argparse.Namespace) -> int:
    """Validate configuration and print warnings."""
    try:
        config, warnings = load_app_config(
            args.config, host=args.host, listen=args.listen, port=args.port
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    print("\nConfiguration summary:")
    print(f"  Device: {config.device.host or '(not set)'} (timeout {config.device.timeout}s)")
    print(f"  Listen: {config.exporter.listen}:{config.exporter.port}")
    print(f"  Process metrics: {'enabled' if config.exporter.process_metrics else 'disabled'}")
    print(f"  Logging level: {config.logging.level}")
    if config.logging.file:
        print(f"  Log file: {config.logging.file}")

    print("\nConfiguration is valid!")
    return 0


async def collect_once(args: argparse.Namespace) -> str:
    """Run a single collection and return the exposition text."""
    config, warnings = load_app_config(
        args.config, host=args.host, listen=args.listen, port=args.port
    )
    for warning in warnings:
        logger.warning(f"Config warning: {warning}")
    require_host(config)
    return await Application(config).collect_once()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="awair-exporter",
        description="Prometheus exporter for Awair air quality monitors (Local API)",
    )

    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--host", help="Awair device hostname or IP (overrides config)")
    parser.add_argument("--listen", metavar="ADDR", help="Metrics listen address")
    parser.add_argument("--port", type=int, help="Metrics listen port")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Enable debug logging (DEBUG level)"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (only errors)")
    parser.add_argument("--log-file", metavar="PATH", help="Write logs to file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    parser.add_argument(
        "--validate", action="store_true", help="Validate configuration and exit"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Collect once, print the metrics to stdout and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Reconfigured by run_app once the config file is loaded
    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"
    else:
        log_config.console_level = "warning"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    if args.validate:
        return validate_config(args)

    try:
        if args.once:
            print(asyncio.run(collect_once(args)), end="")
        else:
            asyncio.run(
                run_app(
                    args.config,
                    cli_log_config=log_config,
                    host=args.host,
                    listen=args.listen,
                    port=args.port,
                )
            )
        return 0
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except AwairError as e:
        logger.error(f"Failed to connect to Awair device: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
