"""
Configuration parsing module with nginx-like syntax support.
"""

from .lexer import Lexer, LexerError, Token, TokenType
from .loader import ConfigError, ConfigLoader
from .parser import ConfigParser, ParseError
from .schema import Config, DeviceConfig, ExporterConfig, LoggingConfig

__all__ = [
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "ConfigParser",
    "ParseError",
    "Config",
    "DeviceConfig",
    "ExporterConfig",
    "LoggingConfig",
    "ConfigError",
    "ConfigLoader",
]
