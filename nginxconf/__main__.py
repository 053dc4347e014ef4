"""
Command-line entry point for nginxconf.

Usage:
    python -m nginxconf /etc/nginx/nginx.conf
    python -m nginxconf --tokens - < nginx.conf
    python -m nginxconf --help
"""

import argparse
import sys

from . import __version__
from .const import DEFAULT_MAX_DEPTH
from .config.groups import group_tokens
from .config.lexer import lex
from .config.loader import ConfigError, ConfigLoader
from .config.parser import Block, ParserOptions
from .config.errors import ParseError
from .config.printer import render, render_tokens
from .logging import get_logger, setup_logging_from_args


logger = get_logger("main")


def check_config(loader: ConfigLoader, path: str, source: str | None) -> int:
    """Parse configuration and print a summary."""
    block = _load(loader, path, source)
    summary = loader.summarize(block)

    print(f"Configuration summary for {path}:")
    print(f"  Top-level directives: {len(block)}")
    print(f"  Directives: {summary.directives}")
    print(f"  Blocks: {summary.blocks}")
    print(f"  Deepest nesting: {summary.max_depth}")
    print("\nConfiguration is valid!")
    return 0


def dump_tokens(path: str, source: str, grouped: bool, max_depth: int | None) -> int:
    """Print the lexer output, optionally with brace groups resolved."""
    tokens = lex(source)
    if grouped:
        try:
            tokens = group_tokens(tokens, max_depth)
        except ParseError as e:
            raise ConfigError(f"Failed to parse configuration: {e.with_filename(path)}") from e
    print(render_tokens(tokens))
    return 0


def _load(loader: ConfigLoader, path: str, source: str | None) -> Block:
    if source is None:
        return loader.load_file(path)
    return loader.load_string(source, path)


def _parse_depth(value: str) -> int | None:
    depth = int(value)
    if depth < 0:
        raise argparse.ArgumentTypeError("depth must be >= 0")
    return depth or None


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nginxconf",
        description="Parse nginx-like configuration files into a directive tree",
    )

    parser.add_argument(
        "config",
        help="Path to configuration file, or - to read from stdin",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--tokens",
        action="store_true",
        help="Print lexer tokens and exit",
    )
    mode.add_argument(
        "--groups",
        action="store_true",
        help="Print tokens with brace groups resolved and exit",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Parse configuration, print a summary and exit",
    )

    parser.add_argument(
        "--max-depth",
        type=_parse_depth,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum block nesting depth, 0 for unlimited (default: {DEFAULT_MAX_DEPTH})",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        log_file=args.log_file,
        colors=not args.no_color,
    )

    path = args.config
    source = None
    if path == "-":
        source = sys.stdin.read()
        path = "<stdin>"

    logger.debug(f"Reading configuration from {path}")
    loader = ConfigLoader(ParserOptions(max_depth=args.max_depth))

    try:
        if args.tokens or args.groups:
            if source is None:
                source = _read(path)
            return dump_tokens(path, source, args.groups, args.max_depth)

        if args.check:
            return check_config(loader, path, source)

        sys.stdout.write(render(_load(loader, path, source)))
        return 0

    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1


def _read(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read configuration: {e}") from e


if __name__ == "__main__":
    sys.exit(main())
