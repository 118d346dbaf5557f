"""Recognizer for signed sums of monomials.

    <monomial>   ::= <number> [ <identifier> [ '^' <number> ] ]
                   | <identifier> [ '^' <number> ]
    <expression> ::= [ '-' ] <monomial> { ( '+' | '-' ) <monomial> }

No products, quotients or parentheses are recognized.  Nothing here
backtracks except where noted: a token consumed on the way to a failure
stays consumed.
"""

from recognizer.acceptors import (
    Accepted, accept_character, accept_identifier, accept_number,
)
from recognizer.tokens import Cursor


def _accept_exponent(cursor: Cursor) -> Accepted:
    # A '^' with no number after it is still consumed.
    ok, cursor = accept_character(cursor, "^")
    if not ok:
        return False, cursor
    return accept_number(cursor)


def accept_monomial(cursor: Cursor) -> Accepted:
    ok, cursor = accept_number(cursor)
    if ok:
        found_identifier, cursor = accept_identifier(cursor)
        if found_identifier:
            _, cursor = _accept_exponent(cursor)
        return True, cursor

    ok, cursor = accept_identifier(cursor)
    if ok:
        _, cursor = _accept_exponent(cursor)
        return True, cursor
    return False, cursor


def accept_expression(cursor: Cursor) -> Accepted:
    _, cursor = accept_character(cursor, "-")
    ok, cursor = accept_monomial(cursor)
    if not ok:
        return False, cursor

    while True:
        ok, after_op = accept_character(cursor, "+")
        if not ok:
            ok, after_op = accept_character(cursor, "-")
        if not ok:
            break
        ok, after_monomial = accept_monomial(after_op)
        if not ok:
            # leave the dangling operator for the caller
            break
        cursor = after_monomial
    return True, cursor
