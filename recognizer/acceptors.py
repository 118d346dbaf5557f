"""Single-token acceptors.

Each acceptor looks at the token under the cursor.  On a match it returns
``(True, cursor)`` with the cursor moved past that one token; otherwise it
returns ``(False, cursor)`` with the very cursor it was given.  The composite
recognizers build on this guarantee.
"""

from typing import Tuple

from recognizer.tokens import Cursor

Accepted = Tuple[bool, Cursor]


def accept_number(cursor: Cursor) -> Accepted:
    token = cursor.current
    if token is not None and token.is_number():
        return True, cursor.advance()
    return False, cursor


def accept_identifier(cursor: Cursor) -> Accepted:
    token = cursor.current
    if token is not None and token.is_identifier():
        return True, cursor.advance()
    return False, cursor


def accept_character(cursor: Cursor, char: str) -> Accepted:
    token = cursor.current
    if token is not None and token.is_symbol(char):
        return True, cursor.advance()
    return False, cursor
