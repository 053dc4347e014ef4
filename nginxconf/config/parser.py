"""
Recursive descent parser for nginx-like configuration syntax.

Applies the directive grammar to a grouped token sequence and builds the
directive tree. The whole pipeline is:

    text --lex()--> tokens --group_tokens()--> grouped tokens --build_block()--> Block

Grammar:
    block      := directive*
    directive  := WORD WORD* (';' | '{' block '}')
    comment    := '#' .* '\\n'
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

from ..const import DEFAULT_FILENAME, DEFAULT_MAX_DEPTH
from ..logging import Loggers
from .errors import (
    ExpectedTerminatorError,
    MaxDepthExceededError,
    ParseError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .groups import group_tokens
from .lexer import Token, TokenType, lex


logger = Loggers.parser()


@dataclass(frozen=True)
class Directive:
    """
    A configuration directive: a name, arguments and an optional block.

    ``block`` is None for a directive terminated by ';' and a (possibly
    empty) tuple of child directives for one terminated by a brace group.

    Examples:
        worker_processes 4;     -> Directive("worker_processes", ("4",))
        events {}               -> Directive("events", (), ())
        location / { ... }      -> Directive("location", ("/",), (...))
    """

    name: str
    args: tuple[str, ...] = ()
    block: tuple["Directive", ...] | None = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.block is None:
            return f"Directive({self.name}, {list(self.args)})"
        return f"Directive({self.name}, {list(self.args)}, block={list(self.block)})"

    @property
    def has_block(self) -> bool:
        return self.block is not None

    @property
    def value(self) -> str | None:
        """First argument or None."""
        return self.args[0] if self.args else None

    def get_directive(self, name: str) -> "Directive | None":
        """Get first child directive with given name."""
        for d in self.block or ():
            if d.name == name:
                return d
        return None

    def get_directives(self, name: str) -> list["Directive"]:
        """Get all child directives with given name."""
        return find_directives(self.block or (), name)


Block = tuple[Directive, ...]


@dataclass
class ParserOptions:
    """Parser settings."""

    # Deepest allowed brace nesting; None disables the check
    max_depth: int | None = DEFAULT_MAX_DEPTH
    # Name reported in error messages
    filename: str = DEFAULT_FILENAME


class DirectiveBuilder:
    """
    Builds the directives of one block from its grouped tokens.

    Nested blocks are built by a new builder for each GROUP token, so the
    recursion depth equals the brace nesting depth.
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        depth: int = 0,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
    ):
        self.tokens = tokens
        self.pos = 0
        self.depth = depth
        self.max_depth = max_depth

    def _current(self) -> Token | None:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _check(self, token_type: TokenType) -> bool:
        token = self._current()
        return token is not None and token.type is token_type

    def build(self) -> Block:
        """Parse directives until the tokens are exhausted."""
        output: list[Directive] = []
        while self._current() is not None:
            output.append(self._parse_directive())
        return tuple(output)

    def _parse_directive(self) -> Directive:
        name_token = self._advance()
        if name_token.type is not TokenType.WORD:
            raise UnexpectedTokenError(
                f"Expected directive name, got {_describe(name_token)}", name_token
            )

        args: list[str] = []
        while self._check(TokenType.WORD):
            args.append(self._advance().value)

        terminator = self._current()

        if terminator is None:
            raise UnexpectedEndOfInputError(
                f"Unexpected end of input in directive '{name_token.value}'; expected ';' or '{{'",
                line=name_token.line,
                column=name_token.column,
            )

        if terminator.type is TokenType.SEMICOLON:
            self._advance()
            return Directive(name_token.value, tuple(args), None, name_token.line, name_token.column)

        if terminator.type is TokenType.GROUP:
            self._advance()
            block = self._parse_group(terminator)
            return Directive(name_token.value, tuple(args), block, name_token.line, name_token.column)

        raise ExpectedTerminatorError(
            f"Expected ';' or '{{' after directive '{name_token.value}', got {_describe(terminator)}",
            terminator,
        )

    def _parse_group(self, group: Token) -> Block:
        depth = self.depth + 1
        if self.max_depth is not None and depth > self.max_depth:
            raise MaxDepthExceededError(self.max_depth, group.line, group.column)
        return DirectiveBuilder(group.content, depth, self.max_depth).build()


def _describe(token: Token) -> str:
    if token.type is TokenType.GROUP:
        return "'{' block"
    if token.type is TokenType.WORD:
        return f"word {token.value!r}"
    return f"'{token.value}'"


def build_block(
    tokens: Sequence[Token],
    depth: int = 0,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> Block:
    """
    Build a block of directives from grouped tokens.

    Args:
        tokens: Tokens with every brace pair already resolved into a GROUP
        depth: Nesting depth of this block (0 = file scope)
        max_depth: Deepest allowed nesting, or None for no limit

    Returns:
        Tuple of directives in source order
    """
    return DirectiveBuilder(tokens, depth, max_depth).build()


def parse_config(source: str, options: ParserOptions | None = None) -> Block:
    """
    Parse a configuration string into its top-level block.

    Args:
        source: Configuration source text
        options: Parser settings (defaults if None)

    Returns:
        Tuple of top-level directives

    Raises:
        ParseError: The first malformed construct found
    """
    if options is None:
        options = ParserOptions()

    try:
        tokens = lex(source)
        grouped = group_tokens(tokens, options.max_depth)
        block = build_block(grouped, max_depth=options.max_depth)
    except ParseError as e:
        if options.filename != DEFAULT_FILENAME:
            e.with_filename(options.filename)
        raise

    logger.debug(f"Parsed {len(block)} top-level directives from {options.filename}")
    return block


def parse_config_file(
    path: str | Path,
    options: ParserOptions | None = None,
    encoding: str = "utf-8",
) -> Block:
    """
    Parse a configuration file.

    Args:
        path: Path to the configuration file
        options: Parser settings; the filename is taken from ``path``
        encoding: Text encoding of the file

    Returns:
        Tuple of top-level directives
    """
    path = Path(path)
    source = path.read_text(encoding=encoding)
    max_depth = options.max_depth if options else DEFAULT_MAX_DEPTH
    return parse_config(source, ParserOptions(max_depth=max_depth, filename=str(path)))


def find_directives(block: Block, name: str) -> list[Directive]:
    """Get all directives in ``block`` (not descendants) with given name."""
    return [d for d in block if d.name == name]


def walk(block: Block, depth: int = 0) -> Iterator[tuple[int, Directive]]:
    """Yield ``(depth, directive)`` pairs depth-first in source order."""
    for directive in block:
        yield depth, directive
        if directive.block is not None:
            yield from walk(directive.block, depth + 1)
