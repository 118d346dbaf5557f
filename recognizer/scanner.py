"""Line scanner: turns one line of input into a ``TokenStream``."""

import logging
import re
from typing import List

from recognizer.tokens import Token, TokenKind, TokenStream

logger = logging.getLogger("recognizer")

TOKEN_REGEX = re.compile(r"\s*(?:([0-9]+)|([A-Za-z][A-Za-z0-9]*)|([!-~]))")


def _validate_characters(line: str) -> None:
    """Reject lines holding anything but printable ASCII and whitespace."""
    bad = set()
    for ch in line:
        if ch.isspace():
            continue
        if not ("!" <= ch <= "~"):
            bad.add(ch)
    if bad:
        bad_sorted = " ".join(sorted(bad))
        raise ValueError(f"Invalid character(s): {bad_sorted}")


def tokenize(line: str) -> TokenStream:
    """Scan *line* into numbers, identifiers and one-character symbols.

    Raises ValueError when the line holds a character the scanner cannot
    represent as a token.
    """
    _validate_characters(line)
    tokens: List[Token] = []
    pos = 0
    text = line.rstrip()
    while pos < len(text):
        m = TOKEN_REGEX.match(text, pos)
        if not m:
            raise ValueError(f"Invalid token at position {pos}")
        pos = m.end()
        if m.group(1):
            tokens.append(Token(TokenKind.NUMBER, int(m.group(1))))
        elif m.group(2):
            tokens.append(Token(TokenKind.IDENTIFIER, m.group(2)))
        else:
            tokens.append(Token(TokenKind.SYMBOL, m.group(3)))
    stream = TokenStream(tokens)
    logger.debug("scanned %d tokens: %s", len(stream), stream)
    return stream
