"""
Tests for logging setup.
"""

import logging

from awair_exporter.logging import (
    ColoredFormatter,
    LogConfig,
    get_log_level,
    get_logger,
    setup_logging,
)


def test_get_logger_prefixes_component() -> None:
    assert get_logger("app").name == "awair_exporter.app"
    assert get_logger("awair_exporter.device").name == "awair_exporter.device"


def test_get_log_level() -> None:
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("nonsense") == logging.INFO


def test_setup_logging_console_and_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "awair.log"

    setup_logging(
        LogConfig(
            console_level="error",
            file_enabled=True,
            file_path=str(log_file),
            module_levels={"device": "warning"},
        )
    )
    get_logger("app").debug("hello from test")

    root = logging.getLogger("awair_exporter")
    assert len(root.handlers) == 2
    assert root.handlers[0].level == logging.ERROR
    assert get_logger("device").level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING

    for handler in root.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()

    for handler in root.handlers:
        handler.close()
    root.handlers.clear()


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord(
        "awair_exporter.collectors.awair", logging.ERROR, __file__, 1, "failed", None, None
    )

    output = formatter.format(record)

    assert "\033[" in output
    assert record.levelname == "ERROR"
    assert record.msg == "failed"
