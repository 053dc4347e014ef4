"""
Brace nesting resolution.

Turns the flat token list produced by the lexer into a tree in which every
matched ``{ ... }`` span is collapsed into a single GROUP token. Grammar
checks are left to the directive builder.
"""

from dataclasses import dataclass
from typing import Sequence

from ..const import DEFAULT_MAX_DEPTH
from ..logging import Loggers
from .errors import MaxDepthExceededError, UnbalancedBracesError, UnmatchedClosingBraceError
from .lexer import Token, TokenType


logger = Loggers.groups()


@dataclass(frozen=True)
class GroupResult:
    """
    Result of resolving one nesting level.

    ``rest`` is the index where scanning stopped: either ``len(tokens)``
    or the index of the closing brace that ends this level.
    """

    content: tuple[Token, ...]
    rest: int


def resolve_groups(
    tokens: Sequence[Token],
    start: int = 0,
    depth: int = 0,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> GroupResult:
    """
    Collect tokens from ``start`` up to the closing brace of this level.

    Args:
        tokens: Flat token sequence from the lexer
        start: Index to start scanning at
        depth: Nesting depth of the level being resolved (0 = top level)
        max_depth: Deepest allowed nesting, or None for no limit

    Returns:
        GroupResult with the level's content and the stop index

    Raises:
        UnbalancedBracesError: An opening brace is never closed
        MaxDepthExceededError: Nesting exceeds max_depth
    """
    content: list[Token] = []
    pos = start

    while pos < len(tokens):
        token = tokens[pos]

        if token.type is TokenType.RBRACE:
            break

        if token.type is TokenType.LBRACE:
            if max_depth is not None and depth + 1 > max_depth:
                raise MaxDepthExceededError(max_depth, token.line, token.column)

            inner = resolve_groups(tokens, pos + 1, depth + 1, max_depth)
            if inner.rest >= len(tokens):
                raise UnbalancedBracesError.at("No matching closing brace", token)

            content.append(Token.group(inner.content, token.line, token.column))
            pos = inner.rest + 1
            continue

        content.append(token)
        pos += 1

    return GroupResult(tuple(content), pos)


def group_tokens(
    tokens: Sequence[Token],
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> list[Token]:
    """
    Resolve all brace pairs of a complete token sequence.

    Raises:
        UnmatchedClosingBraceError: A closing brace has no opening brace
        UnbalancedBracesError: An opening brace is never closed
        MaxDepthExceededError: Nesting exceeds max_depth
    """
    result = resolve_groups(tokens, max_depth=max_depth)

    if result.rest < len(tokens):
        raise UnmatchedClosingBraceError.at(
            "Closing brace without matching opening brace", tokens[result.rest]
        )

    logger.debug(f"Resolved {len(tokens)} tokens into {len(result.content)} top-level tokens")
    return list(result.content)
