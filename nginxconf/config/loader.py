"""
Configuration loader with file reading and error wrapping.
"""

from dataclasses import dataclass
from pathlib import Path

from ..logging import Loggers
from .errors import ParseError
from .parser import Block, ParserOptions, parse_config, walk


logger = Loggers.loader()


class ConfigError(Exception):
    """Exception raised when a configuration cannot be read or parsed."""

    pass


@dataclass(frozen=True)
class ConfigSummary:
    """Counts describing a parsed directive tree."""

    directives: int
    blocks: int
    max_depth: int


class ConfigLoader:
    """
    Loads configuration from files or strings.

    Usage:
        loader = ConfigLoader()
        block = loader.load_file("/etc/nginx/nginx.conf")
        # or
        block = loader.load_string(config_text)
    """

    def __init__(self, options: ParserOptions | None = None):
        self.options = options or ParserOptions()
        self.last_block: Block | None = None

    def load_file(self, path: str | Path, encoding: str = "utf-8") -> Block:
        """
        Load configuration from a file.

        Args:
            path: Path to the configuration file
            encoding: Text encoding of the file

        Returns:
            Parsed top-level block

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Not a file: {path}")

        try:
            source = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        return self.load_string(source, str(path))

    def load_string(self, source: str, filename: str | None = None) -> Block:
        """
        Load configuration from a string.

        Args:
            source: Configuration source text
            filename: Name used in error messages

        Returns:
            Parsed top-level block

        Raises:
            ConfigError: If the configuration cannot be parsed
        """
        options = ParserOptions(
            max_depth=self.options.max_depth,
            filename=filename or self.options.filename,
        )

        try:
            block = parse_config(source, options)
        except ParseError as e:
            raise ConfigError(f"Failed to parse configuration: {e}") from e

        self.last_block = block
        logger.info(f"Loaded {len(block)} top-level directives from {options.filename}")
        return block

    @staticmethod
    def summarize(block: Block) -> ConfigSummary:
        """Count directives, blocks and the deepest nesting level."""
        directives = 0
        blocks = 0
        deepest = 0

        for depth, directive in walk(block):
            directives += 1
            if directive.has_block:
                blocks += 1
                deepest = max(deepest, depth + 1)

        return ConfigSummary(directives=directives, blocks=blocks, max_depth=deepest)
