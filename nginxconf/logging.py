"""
Logging configuration for nginxconf.

Features:
- Console output on stderr with optional colors
- File output with rotation
- Per-module log level configuration

The library itself never configures logging; only the command-line
entry point calls setup_logging().
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


# ANSI color codes for console output
class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_BLUE = "\033[94m"


# Log level colors
LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM + Colors.CYAN,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
}

# Component colors for logger names
COMPONENT_COLORS = {
    "lexer": Colors.MAGENTA,
    "groups": Colors.BLUE,
    "parser": Colors.CYAN,
    "loader": Colors.GREEN,
    "main": Colors.BRIGHT_BLUE,
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to log output.

    Colors are applied based on log level and component name.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        # Save original values
        original_levelname = record.levelname
        original_name = record.name
        original_msg = record.msg

        if self.use_colors:
            level_color = LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{level_color}{record.levelname:8}{Colors.RESET}"

            component_color = ""
            for key, color in COMPONENT_COLORS.items():
                if key in record.name.lower():
                    component_color = color
                    break

            if component_color:
                record.name = f"{component_color}{record.name}{Colors.RESET}"

            if record.levelno >= logging.ERROR:
                record.msg = f"{Colors.RED}{record.msg}{Colors.RESET}"
            elif record.levelno >= logging.WARNING:
                record.msg = f"{Colors.YELLOW}{record.msg}{Colors.RESET}"

        result = super().format(record)

        # Restore original values
        record.levelname = original_levelname
        record.name = original_name
        record.msg = original_msg

        return result


class PlainFormatter(logging.Formatter):
    """Plain formatter without colors for file output."""

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        record.levelname = f"{record.levelname:8}"
        result = super().format(record)
        record.levelname = original_levelname
        return result


@dataclass
class LogConfig:
    """Logging configuration."""

    # Console settings
    console_level: str = "WARNING"
    console_colors: bool = True

    # File settings
    file_enabled: bool = False
    file_path: str = "nginxconf.log"
    file_level: str = "DEBUG"
    file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    file_backup_count: int = 5

    # Format
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    # Per-module levels (module_name -> level)
    module_levels: dict[str, str] | None = None


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure logging for the command-line tool.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger("nginxconf")
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers

    root_logger.handlers.clear()

    # Console handler; stdout is reserved for rendered output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))

    use_colors = config.console_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console_formatter = ColoredFormatter(
        fmt=config.format,
        datefmt=config.date_format,
        use_colors=use_colors,
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(
            PlainFormatter(fmt=config.format, datefmt=config.date_format)
        )
        root_logger.addHandler(file_handler)

    if config.module_levels:
        for module_name, level_str in config.module_levels.items():
            get_logger(module_name).setLevel(get_log_level(level_str))


def setup_logging_from_args(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
    colors: bool = True,
) -> LogConfig:
    """
    Setup logging from command-line arguments.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging
        quiet: Only report errors
        log_file: Optional log file path
        colors: Allow ANSI colors on the console

    Returns:
        The LogConfig that was applied
    """
    config = LogConfig(console_colors=colors)

    if debug:
        config.console_level = "DEBUG"
    elif verbose:
        config.console_level = "INFO"
    elif quiet:
        config.console_level = "ERROR"
    else:
        config.console_level = "WARNING"

    if log_file:
        config.file_enabled = True
        config.file_path = log_file

    setup_logging(config)
    return config


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with nginxconf)

    Returns:
        Logger instance
    """
    if name.startswith("nginxconf"):
        return logging.getLogger(name)
    return logging.getLogger(f"nginxconf.{name}")


class Loggers:
    """Pre-configured loggers for the pipeline stages."""

    @staticmethod
    def lexer() -> logging.Logger:
        return get_logger("config.lexer")

    @staticmethod
    def groups() -> logging.Logger:
        return get_logger("config.groups")

    @staticmethod
    def parser() -> logging.Logger:
        return get_logger("config.parser")

    @staticmethod
    def loader() -> logging.Logger:
        return get_logger("config.loader")

    @staticmethod
    def main() -> logging.Logger:
        return get_logger("main")
