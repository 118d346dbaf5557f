"""Passes over a validated equation: variable count and degree.

Every pass walks its own cursor over the stream and hands it back, usually
exhausted.
"""

from typing import Optional, Tuple

from recognizer.acceptors import Accepted
from recognizer.tokens import Cursor


def single_variable_name(cursor: Cursor) -> Tuple[Optional[str], Cursor]:
    """Return the one identifier name used throughout, or None.

    None means either that no identifier occurs or that two different names
    do; in the latter case the returned cursor rests on the first identifier
    that differs.
    """
    name = None
    while not cursor.at_end:
        token = cursor.current
        if token.is_identifier():
            if name is None:
                name = token.value
            elif token.value != name:
                return None, cursor
        cursor = cursor.advance()
    return name, cursor


def accept_single_variable(cursor: Cursor) -> Accepted:
    name, cursor = single_variable_name(cursor)
    return name is not None, cursor


def validate_exponents(cursor: Cursor) -> Accepted:
    """Check that every '^' is followed by a number.

    The sign of the exponent is not examined: a number token is always
    natural, and a '-' after '^' already fails the number check.
    """
    while not cursor.at_end:
        if cursor.current.is_symbol("^"):
            cursor = cursor.advance()
            if cursor.at_end or not cursor.current.is_number():
                return False, cursor
        cursor = cursor.advance()
    return True, cursor


def compute_degree(cursor: Cursor) -> Tuple[int, Cursor]:
    """Return the highest exponent written on an identifier.

    An identifier without an exponent counts as degree 1 but never raises a
    maximum already found.  The exponent on the first identifier of the
    stream is taken as is, so ``x^0 = 1`` has degree 0 while
    ``x + x^0 = 1`` has degree 1.
    """
    highest = 1
    seen_variable = False
    while not cursor.at_end:
        token = cursor.current
        cursor = cursor.advance()
        if not token.is_identifier():
            continue
        if cursor.current is not None and cursor.current.is_symbol("^"):
            exponent = cursor.advance().current
            if exponent is not None and exponent.is_number():
                if not seen_variable:
                    highest = exponent.value
                else:
                    highest = max(highest, exponent.value)
                cursor = cursor.advance().advance()
        seen_variable = True
    return highest, cursor
