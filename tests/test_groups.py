"""
Tests for brace nesting resolution.
"""

import pytest

from nginxconf.config.errors import (
    MaxDepthExceededError,
    UnbalancedBracesError,
    UnmatchedClosingBraceError,
)
from nginxconf.config.groups import group_tokens, resolve_groups
from nginxconf.config.lexer import Token, lex


def test_flat_tokens_pass_through() -> None:
    tokens = lex("a b; c;")
    assert group_tokens(tokens) == tokens


def test_braces_collapse_into_groups() -> None:
    assert group_tokens(lex("a { b; } c;")) == [
        Token.word("a"),
        Token.group([Token.word("b"), Token.semicolon()]),
        Token.word("c"),
        Token.semicolon(),
    ]


def test_nested_groups() -> None:
    """Hand-built tokens resolve the same way as lexed ones."""
    tokens = [
        Token.lbrace(),
        Token.lbrace(),
        Token.word("hello"),
        Token.rbrace(),
        Token.rbrace(),
        Token.lbrace(),
        Token.word("hello 2"),
        Token.rbrace(),
    ]
    assert group_tokens(tokens) == [
        Token.group([Token.group([Token.word("hello")])]),
        Token.group([Token.word("hello 2")]),
    ]


def test_empty_group() -> None:
    assert group_tokens(lex("events {}")) == [Token.word("events"), Token.group([])]


def test_group_position_is_opening_brace() -> None:
    grouped = group_tokens(lex("a\n  { b; }"))
    assert (grouped[1].line, grouped[1].column) == (2, 3)


def test_resolve_stops_at_closing_brace() -> None:
    """The closing brace is not consumed and rest points at it."""
    tokens = lex("a; } b;")
    result = resolve_groups(tokens)
    assert result.content == (Token.word("a"), Token.semicolon())
    assert result.rest == 2


def test_resolve_reaches_end() -> None:
    tokens = lex("a { b; }")
    assert resolve_groups(tokens).rest == len(tokens)


def test_missing_closing_brace() -> None:
    with pytest.raises(UnbalancedBracesError) as exc_info:
        group_tokens(lex("server { listen 80;"))
    assert (exc_info.value.line, exc_info.value.column) == (1, 8)


def test_missing_inner_closing_brace() -> None:
    with pytest.raises(UnbalancedBracesError):
        group_tokens(lex("a { b { c; }"))


def test_stray_closing_brace() -> None:
    with pytest.raises(UnmatchedClosingBraceError) as exc_info:
        group_tokens(lex("a;\n}\nb;"))
    assert exc_info.value.line == 2


def test_max_depth() -> None:
    tokens = lex("a { b { c; } }")
    assert len(group_tokens(tokens, max_depth=2)) == 2
    with pytest.raises(MaxDepthExceededError) as exc_info:
        group_tokens(tokens, max_depth=1)
    assert exc_info.value.max_depth == 1


def test_max_depth_disabled() -> None:
    depth = 50
    tokens = lex("{" * depth + "}" * depth)
    assert len(group_tokens(tokens, max_depth=None)) == 1
