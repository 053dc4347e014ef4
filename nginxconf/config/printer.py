"""
Serialization of directive trees and token sequences for debugging.

render() output re-parses to the same directive tree; whitespace and
comments of the original text are not preserved.
"""

from typing import Sequence

from ..const import INDENT
from .lexer import Token, TokenType
from .parser import Block, Directive


def render(block: Block, indent: int = 0) -> str:
    """
    Render a block as nested, indented text.

    Args:
        block: Directives to render
        indent: Indentation level of the first line (one INDENT per level)

    Returns:
        One line per directive or closing brace, newline terminated
    """
    return "".join(_render_directive(directive, indent) for directive in block)


def _render_directive(directive: Directive, indent: int) -> str:
    prefix = INDENT * indent
    head = " ".join((directive.name, *directive.args))

    if directive.block is None:
        return f"{prefix}{head};\n"
    if not directive.block:
        return f"{prefix}{head} {{}}\n"
    return f"{prefix}{head} {{\n{render(directive.block, indent + 1)}{prefix}}}\n"


def render_tokens(tokens: Sequence[Token]) -> str:
    """
    Render tokens on one line: words quoted, groups in parentheses.

    Example:
        server { listen 80; }  ->  'server' ( 'listen' '80' ; )
    """
    return " ".join(_render_token(token) for token in tokens)


def _render_token(token: Token) -> str:
    if token.type is TokenType.WORD:
        return f"'{token.value}'"
    if token.type is TokenType.GROUP:
        inner = render_tokens(token.content)
        return f"( {inner} )" if inner else "( )"
    return token.value
