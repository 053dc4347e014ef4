"""
Lexer (tokenizer) for nginx-like configuration syntax.

Produces a flat list of tokens:
- Words (directive names and arguments, collected verbatim)
- Braces and semicolons

Whitespace (space, tab, newline) and single-line (#) comments are skipped.
There is no quoting, escaping or literal typing: every run of characters
that is not a delimiter becomes a word. The lexer never fails.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from ..logging import Loggers


logger = Loggers.lexer()

WHITESPACE = " \t\n"
DELIMITERS = WHITESPACE + "#;{}"


class TokenType(Enum):
    """Token types for the nginx-like config syntax."""

    WORD = auto()       # directive name or argument
    SEMICOLON = auto()  # ;
    LBRACE = auto()     # {
    RBRACE = auto()     # }
    GROUP = auto()      # matched { ... } span, produced by group_tokens()


@dataclass(frozen=True)
class Token:
    """
    A single token.

    The token kind is closed: ``type`` selects which fields are meaningful.
    WORD tokens carry their text in ``value``; GROUP tokens carry the
    interior tokens in ``content``. Source positions are informational and
    do not take part in equality.
    """

    type: TokenType
    value: str = ""
    content: tuple["Token", ...] = ()
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.type is TokenType.GROUP:
            return f"Token(GROUP, {list(self.content)!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    @classmethod
    def word(cls, text: str, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.WORD, text, line=line, column=column)

    @classmethod
    def semicolon(cls, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.SEMICOLON, ";", line=line, column=column)

    @classmethod
    def lbrace(cls, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.LBRACE, "{", line=line, column=column)

    @classmethod
    def rbrace(cls, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.RBRACE, "}", line=line, column=column)

    @classmethod
    def group(cls, content, line: int = 0, column: int = 0) -> "Token":
        return cls(TokenType.GROUP, content=tuple(content), line=line, column=column)


SINGLE_CHAR_TOKENS = {
    ";": TokenType.SEMICOLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


class Lexer:
    """
    Tokenizer for nginx-like configuration syntax.

    Example config:
        server {
            listen 80;   # comment
            location / {
                allow all;
            }
        }
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Advance position and return the consumed character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _skip_whitespace(self) -> None:
        char = self._current()
        while char and char in WHITESPACE:
            self._advance()
            char = self._current()

    def _skip_comment(self) -> bool:
        """Skip a # comment including its newline. Returns True if skipped."""
        if self._current() != "#":
            return False

        while self._current() and self._advance() != "\n":
            pass
        return True

    def _skip_whitespace_and_comments(self) -> None:
        while True:
            self._skip_whitespace()
            if not self._skip_comment():
                break

    def _read_word(self) -> Token:
        start_line = self.line
        start_col = self.column
        start_pos = self.pos

        while self._current() and self._current() not in DELIMITERS:
            self._advance()

        return Token.word(self.source[start_pos:self.pos], start_line, start_col)

    def next_token(self) -> Token | None:
        """Get the next token, or None once the input is exhausted."""
        self._skip_whitespace_and_comments()

        char = self._current()
        if not char:
            return None

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            token = Token(token_type, char, line=self.line, column=self.column)
            self._advance()
            return token

        return self._read_word()

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source."""
        while True:
            token = self.next_token()
            if token is None:
                break
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()


def lex(source: str) -> list[Token]:
    """Tokenize a source string into a flat list of tokens."""
    tokens = list(Lexer(source))
    logger.debug(f"Lexed {len(tokens)} tokens from {len(source)} characters")
    return tokens
