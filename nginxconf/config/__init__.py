"""
Configuration parsing module with nginx-like syntax support.
"""

from .errors import (
    ExpectedTerminatorError,
    MaxDepthExceededError,
    ParseError,
    UnbalancedBracesError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnmatchedClosingBraceError,
)
from .groups import GroupResult, group_tokens, resolve_groups
from .lexer import Lexer, Token, TokenType, lex
from .loader import ConfigError, ConfigLoader, ConfigSummary
from .parser import (
    Block,
    Directive,
    DirectiveBuilder,
    ParserOptions,
    build_block,
    find_directives,
    parse_config,
    parse_config_file,
    walk,
)
from .printer import render, render_tokens

__all__ = [
    "Block",
    "ConfigError",
    "ConfigLoader",
    "ConfigSummary",
    "Directive",
    "DirectiveBuilder",
    "ExpectedTerminatorError",
    "GroupResult",
    "Lexer",
    "MaxDepthExceededError",
    "ParseError",
    "ParserOptions",
    "Token",
    "TokenType",
    "UnbalancedBracesError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnmatchedClosingBraceError",
    "build_block",
    "find_directives",
    "group_tokens",
    "lex",
    "parse_config",
    "parse_config_file",
    "render",
    "render_tokens",
    "resolve_groups",
    "walk",
]
