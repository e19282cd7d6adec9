class IniError(Exception):
    pass


class ParseError(IniError):
    """The text could not be parsed into a document.

    Attributes:
        line: The 1-based line of the offending token, if known.
        column: The 1-based column of the offending token, if known.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        super().__init__(message)

        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message

        return f"{self.message} (line {self.line}, column {self.column})"


class LexError(ParseError):
    pass
