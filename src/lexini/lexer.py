"""Tokenizer for INI text.

Tokens:

    [ ] =
        Punctuation, one token each.

    newline
        Either '\\n' or '\\r\\n'. A lone '\\r' is not a line ending.

    string
        A bare run of the characters 'A-Z a-z 0-9 _ . / -',
        or anything enclosed in double quotes.
        Inside quotes, '\\"' is an embedded quote; any other backslash is kept as is.

Spaces and tabs between tokens are skipped.
Comments start with ';' or '#' and run until the end of the line, but the line ending itself is still a token.
"""

import dataclasses
import enum
import string
from collections.abc import Iterator

from .exceptions import LexError

WHITESPACE = " \t"
COMMENT_CHARS = ";#"
BARE_CHARS = frozenset(string.ascii_letters + string.digits + "_./-")

QUOTE = '"'
ESCAPED_QUOTE = '\\"'


class Kind(enum.Enum):
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    EQUAL = "="
    NEWLINE = "newline"
    STRING = "string"


_PUNCTUATION = {
    "[": Kind.LEFT_BRACKET,
    "]": Kind.RIGHT_BRACKET,
    "=": Kind.EQUAL,
}


@dataclasses.dataclass(slots=True, frozen=True)
class Token:
    """A single token.

    Attributes:
        kind: What the token is.
        text: The (unescaped) text of a string token, otherwise None.
        pos: Offset of the token's first character in the source text.
            Tokens compare equal regardless of where they were found.
    """

    kind: Kind
    text: str | None = None
    pos: int = dataclasses.field(default=0, compare=False)

    def __str__(self) -> str:
        match self.kind:
            case Kind.STRING:
                return f"string {self.text!r}"
            case Kind.NEWLINE:
                return "newline"
            case _:
                return f"'{self.kind.value}'"


class Lexer:
    """Turns INI text into tokens on demand.

    Args:
        text: The text to tokenize.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

        # A token scanned by peek() and the position just past it.
        self._lookahead: tuple[Token | None, int] | None = None

    def next(self) -> Token | None:
        """Consume the next token.

        Returns:
            The token, or None at the end of the text.

        Raises:
            LexError: A quoted string is unterminated, or a character cannot start any token.
        """

        if self._lookahead is not None:
            token, self.pos = self._lookahead
            self._lookahead = None
            return token

        return self._scan()

    def peek(self) -> Token | None:
        """Look at the next token without consuming it.

        Returns:
            Whatever the next call to next() will return.

        Raises:
            See next().
        """

        if self._lookahead is None:
            start = self.pos

            try:
                token = self._scan()
                self._lookahead = (token, self.pos)
            finally:
                self.pos = start

        return self._lookahead[0]

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()) is not None:
            yield token

    def location(self, pos: int) -> tuple[int, int]:
        """Convert an offset in the text to a 1-based line and column."""

        line = self.text.count("\n", 0, pos) + 1
        column = pos - self.text.rfind("\n", 0, pos)

        return line, column

    def _scan(self) -> Token | None:
        self._skip_whitespace()
        self._skip_comment()

        if self.pos >= len(self.text):
            return None

        start = self.pos
        char = self.text[start]

        if kind := _PUNCTUATION.get(char):
            self.pos += 1
            return Token(kind, pos=start)

        if length := self._newline_length():
            self.pos += length
            return Token(Kind.NEWLINE, pos=start)

        if char == QUOTE:
            return Token(Kind.STRING, self._scan_quoted(), start)

        return Token(Kind.STRING, self._scan_bare(), start)

    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _skip_comment(self):
        if self.pos >= len(self.text) or self.text[self.pos] not in COMMENT_CHARS:
            return

        while self.pos < len(self.text) and not self._newline_length():
            self.pos += 1

    def _newline_length(self) -> int:
        if self.text.startswith("\n", self.pos):
            return 1
        elif self.text.startswith("\r\n", self.pos):
            return 2

        return 0

    def _scan_quoted(self) -> str:
        start = self.pos
        chars = []

        # Skip the opening quote.
        self.pos += 1

        while self.pos < len(self.text):
            if self.text.startswith(ESCAPED_QUOTE, self.pos):
                chars.append(QUOTE)
                self.pos += len(ESCAPED_QUOTE)
                continue

            char = self.text[self.pos]
            self.pos += 1

            if char == QUOTE:
                return "".join(chars)

            chars.append(char)

        raise LexError("unterminated quoted string", *self.location(start))

    def _scan_bare(self) -> str:
        start = self.pos

        while self.pos < len(self.text) and self.text[self.pos] in BARE_CHARS:
            self.pos += 1

        if self.pos == start:
            raise LexError(
                f"unexpected character {self.text[start]!r}", *self.location(start)
            )

        return self.text[start : self.pos]
