"""
Tests for rendering directive trees and tokens.
"""

import pytest

from nginxconf.config.groups import group_tokens
from nginxconf.config.lexer import lex
from nginxconf.config.parser import Directive, parse_config
from nginxconf.config.printer import render, render_tokens


def test_render_simple() -> None:
    assert render(parse_config("worker_processes  4 ;")) == "worker_processes 4;\n"


def test_render_empty_block() -> None:
    assert render(parse_config("events { }")) == "events {}\n"


def test_render_nested() -> None:
    block = parse_config("server { listen 80; location / { allow all; } }")
    assert render(block) == (
        "server {\n"
        "\tlisten 80;\n"
        "\tlocation / {\n"
        "\t\tallow all;\n"
        "\t}\n"
        "}\n"
    )


def test_render_indent() -> None:
    assert render((Directive("a", ("1",)),), indent=2) == "\t\ta 1;\n"


def test_render_nothing() -> None:
    assert render(()) == ""


@pytest.mark.parametrize(
    "source",
    [
        "worker_processes 4;",
        "events {}",
        "a b c {} d; e { f { g {} h; } }",
        "server { listen 80 default_server; location ~* \\.php$ { fastcgi_pass unix:/run/php.sock; } }",
    ],
)
def test_round_trip(source: str) -> None:
    block = parse_config(source)
    assert parse_config(render(block)) == block


def test_round_trip_sample(sample_config: str) -> None:
    block = parse_config(sample_config)
    assert parse_config(render(block)) == block


def test_render_tokens() -> None:
    assert render_tokens(lex("a { b; }")) == "'a' { 'b' ; }"


def test_render_grouped_tokens() -> None:
    tokens = group_tokens(lex("server { location / { a; b d; } } x {}"))
    assert render_tokens(tokens) == "'server' ( 'location' '/' ( 'a' ; 'b' 'd' ; ) ) 'x' ( )"
