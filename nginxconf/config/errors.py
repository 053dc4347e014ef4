"""
Exceptions raised while parsing nginx-like configuration.

Every stage fails fast: the first malformed construct raises one of the
ParseError subclasses below and no partial tree is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class ParseError(Exception):
    """Base class for all parse failures."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.line is not None:
            text = f"Line {self.line}, column {self.column}: {text}"
        if self.filename:
            text = f"{self.filename}: {text}"
        return text

    def with_filename(self, filename: str) -> "ParseError":
        """Attach a filename and refresh the exception message."""
        self.filename = filename
        self.args = (self._format(),)
        return self

    @classmethod
    def at(cls, message: str, token: Token | None, **kwargs) -> "ParseError":
        """Build an error positioned at a token (or unpositioned if None)."""
        if token is None:
            return cls(message, **kwargs)
        return cls(message, token.line, token.column, **kwargs)


class UnbalancedBracesError(ParseError):
    """An opening brace has no matching closing brace."""


class UnmatchedClosingBraceError(ParseError):
    """A closing brace appears with no corresponding opening brace."""


class UnexpectedTokenError(ParseError):
    """A directive name was expected but a structural token was found."""

    def __init__(self, message: str, token: Token, **kwargs):
        self.token = token
        super().__init__(message, token.line, token.column, **kwargs)


class ExpectedTerminatorError(ParseError):
    """A directive's arguments are followed by neither ';' nor a block."""

    def __init__(self, message: str, token: Token | None = None, **kwargs):
        self.token = token
        if token is not None:
            kwargs.setdefault("line", token.line)
            kwargs.setdefault("column", token.column)
        super().__init__(message, **kwargs)


class UnexpectedEndOfInputError(ExpectedTerminatorError):
    """Input ended in the middle of a directive."""


class MaxDepthExceededError(ParseError):
    """Blocks are nested deeper than the configured limit."""

    def __init__(self, max_depth: int, line: int | None = None, column: int | None = None):
        self.max_depth = max_depth
        super().__init__(f"Blocks nested deeper than {max_depth} levels", line, column)
