"""
Configuration loader with file reading and validation.
"""

from pathlib import Path

from .lexer import LexerError
from .parser import Block, ConfigDocument, ParseError, parse_config
from .schema import Config


class ConfigError(Exception):
    """Exception raised for configuration errors."""


class ConfigLoader:
    """
    Loads and validates configuration from files or strings.

    Usage:
        loader = ConfigLoader()
        config = loader.load_file("/etc/awair-exporter/config.conf")
        # or
        config = loader.load_string(config_text)
    """

    # Known directives for each block type
    KNOWN_DIRECTIVES = {
        "device": {"host", "timeout", "user_agent"},
        "exporter": {"listen", "port", "process_metrics"},
        "logging": {"level", "file", "file_level", "file_max_size", "file_keep", "colors", "format"},
    }

    def __init__(self):
        self.last_document: ConfigDocument | None = None

    def load_file(self, path: str | Path) -> Config:
        """
        Load configuration from a file.

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            source = path.read_text()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        return self.load_string(source, str(path))

    # Shorter alias
    def load(self, path: str | Path) -> Config:
        return self.load_file(path)

    def load_string(self, source: str, filename: str = "<string>") -> Config:
        """
        Load configuration from a string.

        Raises:
            ConfigError: If configuration cannot be parsed
        """
        try:
            document = parse_config(source, filename)
        except (LexerError, ParseError) as e:
            raise ConfigError(f"Failed to parse configuration: {e}") from e

        self.last_document = document

        try:
            return Config.from_document(document)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e

    def validate(self, config: Config) -> list[str]:
        """
        Validate configuration and return list of warnings.

        Args:
            config: Configuration to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if self.last_document:
            warnings.extend(self._check_unknown(self.last_document))

        if not config.device.host:
            warnings.append("Device host is not configured")

        if not 0 < config.exporter.port < 65536:
            warnings.append(f"Exporter port {config.exporter.port} is out of range")

        if config.device.timeout <= 0:
            warnings.append("Device timeout must be positive")

        return warnings

    def _check_unknown(self, document: ConfigDocument) -> list[str]:
        """Check for unknown blocks and directives in parsed document."""
        warnings = []

        for directive in document.directives:
            warnings.append(
                f"Unknown top-level directive '{directive.name}' (line {directive.line})"
            )

        for block in document.blocks:
            known = self.KNOWN_DIRECTIVES.get(block.type)
            if known is None:
                warnings.append(f"Unknown block '{block.type}' (line {block.line})")
                continue
            warnings.extend(self._check_block(block, known))

        return warnings

    @staticmethod
    def _check_block(block: Block, known: set[str]) -> list[str]:
        warnings = [
            f"Unknown directive '{d.name}' in {block.type} block (line {d.line})"
            for d in block.directives
            if d.name not in known
        ]
        warnings.extend(
            f"Unexpected nested block '{nested.type}' in {block.type} block (line {nested.line})"
            for nested in block.blocks
        )
        return warnings
