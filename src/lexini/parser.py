"""Parser for INI documents.

Sections and keys each occupy their own line:

    document       := (blank_line | section_header | key_line)*
    blank_line     := newline
    section_header := '[' string ']' (newline | end)
    key_line       := string '=' string (newline | end)

Keys before any section header go into the default section.
Repeating a section header replaces the earlier section; repeating a key overwrites its value.
"""

import logging

from .exceptions import ParseError
from .ini import DEFAULT_SECTION, Ini
from .lexer import Kind, Lexer, Token

_log = logging.getLogger(__name__)


class Parser:
    """Builds a document from the tokens of a lexer.

    Args:
        lexer: The lexer to read tokens from.
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer

    def parse(self) -> Ini:
        """Parse the whole text.

        Returns:
            The document.

        Raises:
            ParseError: The text is not valid INI.
        """

        ini = Ini()
        current = DEFAULT_SECTION
        section = ini.section(current)

        while (token := self.lexer.peek()) is not None:
            match token.kind:
                case Kind.NEWLINE:
                    self.lexer.next()

                case Kind.LEFT_BRACKET:
                    current = self._section()
                    section = ini.add_section(current)
                    _log.debug("[parser] opened section %r", current)

                case Kind.STRING:
                    name, value = self._key()
                    section.insert(name, value)
                    _log.debug("[parser] set key %r in section %r", name, current)

                case _:
                    raise self._error(
                        f"expected a section or key, found {token}", token
                    )

        _log.debug("[parser] parsed %d section(s)", len(ini))

        return ini

    def _section(self) -> str:
        self._expect(Kind.LEFT_BRACKET, "'['")
        name = self._expect(Kind.STRING, "a section name").text
        self._expect(Kind.RIGHT_BRACKET, "']'")
        self._end_of_line("section header")

        return name

    def _key(self) -> tuple[str, str]:
        token = self._expect(Kind.STRING, "a key name")
        if not token.text:
            raise self._error("key name is empty", token)

        self._expect(Kind.EQUAL, "'='")
        value = self._expect(Kind.STRING, "a value").text
        self._end_of_line("key")

        return token.text, value

    def _expect(self, kind: Kind, what: str) -> Token:
        token = self.lexer.next()

        if token is None:
            raise self._error(f"expected {what}, found end of input")
        elif token.kind is not kind:
            raise self._error(f"expected {what}, found {token}", token)

        return token

    def _end_of_line(self, construct: str):
        token = self.lexer.next()

        if token is not None and token.kind is not Kind.NEWLINE:
            raise self._error(
                f"expected end of line after {construct}, found {token}", token
            )

    def _error(self, message: str, token: Token | None = None) -> ParseError:
        pos = self.lexer.pos if token is None else token.pos
        return ParseError(message, *self.lexer.location(pos))


def parse(text: str) -> Ini:
    """Parse INI text into a document.

    Args:
        text: The text to parse.

    Returns:
        The document.

    Raises:
        ParseError: The text is not valid INI. LexError, a subclass, is raised for malformed tokens.
    """

    return Parser(Lexer(text)).parse()
