import logging
from typing import TextIO

import chardet

from .exceptions import IniError
from .ini import Ini
from .parser import parse

_log = logging.getLogger(__name__)


def loads(text: str) -> Ini:
    """Parse INI text. Same as parse()."""

    return parse(text)


def load(file: TextIO) -> Ini:
    """Parse INI text from a file.

    Args:
        file: The file to read.

    Returns:
        The document.

    Raises:
        ParseError: The text is not valid INI.
    """

    return parse(file.read())


def loadb(data: bytes, encoding: str | None = None) -> Ini:
    """Parse INI text from raw bytes.

    Args:
        data: The bytes to decode and parse.
        encoding: The encoding of the bytes.
            If None, UTF-8 is tried first and the encoding is detected otherwise.

    Returns:
        The document.

    Raises:
        IniError: The bytes could not be decoded.
        ParseError: The text is not valid INI.
    """

    return parse(decode(data, encoding))


def decode(data: bytes, encoding: str | None = None) -> str:
    """Decode INI bytes into text.

    Args:
        data: The bytes to decode.
        encoding: See loadb().

    Returns:
        The text.

    Raises:
        IniError: The encoding could not be detected, or the bytes are not valid in it.
    """

    if encoding is None:
        try:
            # Tolerate the BOM left by some Windows editors.
            return data.decode("utf_8_sig")
        except UnicodeDecodeError:
            encoding = detect_encoding(data)

    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise IniError(f"failed to decode INI text as {encoding}") from e


def detect_encoding(data: bytes) -> str:
    """Detect the encoding of bytes using chardet.

    Args:
        data: The bytes.

    Returns:
        The encoding, lowercased.

    Raises:
        IniError: No encoding could be detected.
    """

    result = chardet.detect(data)

    if not (encoding := result["encoding"]):
        raise IniError("failed to detect INI text encoding")

    encoding = encoding.lower()
    _log.debug("detected encoding %s (confidence %s)", encoding, result["confidence"])

    return encoding
