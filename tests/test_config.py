"""
Tests for configuration loading and validation.
"""

import pytest

from awair_exporter.config.lexer import LexerError, TokenType, tokenize
from awair_exporter.config.loader import ConfigError, ConfigLoader
from awair_exporter.config.parser import ParseError, parse_config
from awair_exporter.config.schema import Config
from awair_exporter.const import DEFAULT_PORT, DEFAULT_TIMEOUT


def test_load_example_config(example_config_path) -> None:
    """Test that example config loads without errors."""
    loader = ConfigLoader()

    config = loader.load(str(example_config_path))

    assert isinstance(config, Config)
    assert config.device.host == "192.168.1.50"
    assert config.device.timeout == 5
    assert config.exporter.port == 9185
    assert config.exporter.process_metrics is True
    assert config.logging.file is None


def test_validate_example_config(example_config_path) -> None:
    """Example config produces no warnings."""
    loader = ConfigLoader()
    config = loader.load_file(example_config_path)

    assert loader.validate(config) == []


def test_defaults_without_blocks() -> None:
    config = ConfigLoader().load_string("")

    assert config.device.host == ""
    assert config.device.timeout == DEFAULT_TIMEOUT
    assert config.exporter.port == DEFAULT_PORT
    assert config.logging.level == "info"


def test_durations_and_booleans() -> None:
    config = ConfigLoader().load_string(
        """
        device { host "awair.local"; timeout 1500ms; }
        exporter { process_metrics off; listen "127.0.0.1"; port 9200; }
        logging { level debug; colors false; file "/tmp/awair.log"; file_keep 2; }
        """
    )

    assert config.device.timeout == pytest.approx(1.5)
    assert config.exporter.process_metrics is False
    assert config.exporter.listen == "127.0.0.1"
    assert config.exporter.port == 9200
    assert config.logging.level == "debug"
    assert config.logging.colors is False
    assert config.logging.file == "/tmp/awair.log"
    assert config.logging.file_keep == 2


def test_validate_reports_problems() -> None:
    loader = ConfigLoader()
    config = loader.load_string(
        """
        device { hostname "typo"; }
        exporter { port 70000; }
        metrics { }
        stray on;
        """
    )

    warnings = loader.validate(config)

    assert any("Unknown directive 'hostname'" in w for w in warnings)
    assert any("Device host is not configured" in w for w in warnings)
    assert any("out of range" in w for w in warnings)
    assert any("Unknown block 'metrics'" in w for w in warnings)
    assert any("Unknown top-level directive 'stray'" in w for w in warnings)


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader().load_file(tmp_path / "missing.conf")


def test_syntax_error_wrapped() -> None:
    with pytest.raises(ConfigError, match="Failed to parse"):
        ConfigLoader().load_string("device { host \"x\" }")


def test_bad_value_wrapped() -> None:
    with pytest.raises(ConfigError, match="Invalid configuration value"):
        ConfigLoader().load_string('exporter { port "eighty"; }')


def test_lexer_tokens() -> None:
    tokens = tokenize('# comment\ndevice /* inline */ { timeout 2m; name "a\\"b"; }')

    assert [t.type for t in tokens] == [
        TokenType.IDENTIFIER,
        TokenType.LBRACE,
        TokenType.IDENTIFIER,
        TokenType.DURATION,
        TokenType.SEMICOLON,
        TokenType.IDENTIFIER,
        TokenType.STRING,
        TokenType.SEMICOLON,
        TokenType.RBRACE,
        TokenType.EOF,
    ]
    assert tokens[3].value == 120
    assert tokens[6].value == 'a"b'
    assert tokens[2].line == 2


def test_lexer_errors() -> None:
    with pytest.raises(LexerError, match="Unknown duration unit"):
        tokenize("timeout 5y;")
    with pytest.raises(LexerError, match="Unterminated string"):
        tokenize('host "abc')
    with pytest.raises(LexerError, match="Unterminated multi-line comment"):
        tokenize("/* never closed")


def test_parser_blocks() -> None:
    doc = parse_config('device "kitchen" { host "a"; }')

    block = doc.get_block("device")
    assert block is not None
    assert block.name == "kitchen"
    assert block.get_value("host") == "a"
    assert block.get_value("timeout", 3) == 3


def test_parser_unclosed_block() -> None:
    with pytest.raises(ParseError, match="to close 'device' block"):
        parse_config('device { host "a";')
