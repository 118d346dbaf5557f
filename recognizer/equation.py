"""Equation structure: ``<expression> '=' <expression>`` and nothing else."""

from typing import Optional

from recognizer.acceptors import Accepted, accept_character
from recognizer.expression import accept_expression
from recognizer.tokens import Cursor


def count_equals_exactly_one(cursor: Cursor) -> Accepted:
    """Scan to the end of the stream and check it holds exactly one '='.

    The returned cursor is always exhausted, whatever the outcome.
    """
    count = 0
    while not cursor.at_end:
        if cursor.current.is_symbol("="):
            count += 1
        cursor = cursor.advance()
    return count == 1, cursor


def accept_equation(cursor: Cursor, counter: Optional[Cursor] = None) -> Accepted:
    """Recognize a whole equation starting at *cursor*.

    *counter* is the independent cursor used to count '=' symbols; it
    defaults to *cursor* itself.
    """
    if counter is None:
        counter = cursor
    ok, _ = count_equals_exactly_one(counter)
    if not ok:
        return False, cursor

    ok, cursor = accept_expression(cursor)
    if not ok:
        return False, cursor
    ok, cursor = accept_character(cursor, "=")
    if not ok:
        return False, cursor
    ok, cursor = accept_expression(cursor)
    if not ok:
        return False, cursor
    return cursor.at_end, cursor
