"""
Parser for nginx-like configuration files.

Usage:
    from nginxconf import parse_config, render

    block = parse_config("server { listen 80; }")
    print(render(block))
"""

from .const import APP_VERSION
from .config import (
    Block,
    Directive,
    ParseError,
    ParserOptions,
    parse_config,
    parse_config_file,
    render,
)

__version__ = APP_VERSION

__all__ = [
    "Block",
    "Directive",
    "ParseError",
    "ParserOptions",
    "parse_config",
    "parse_config_file",
    "render",
    "__version__",
]
