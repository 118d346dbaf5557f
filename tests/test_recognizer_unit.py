"""Tests for the acceptors and the expression / equation recognizers."""

import pytest

from recognizer.acceptors import accept_character, accept_identifier, accept_number
from recognizer.equation import accept_equation, count_equals_exactly_one
from recognizer.expression import accept_expression, accept_monomial
from recognizer.scanner import tokenize


def _cursor(line):
    return tokenize(line).cursor()


# ── atomic acceptors ───────────────────────────────────────────────────

@pytest.mark.parametrize("line", ["", "x", "+", "=", "^ 2"])
def test_accept_number_failure_keeps_cursor(line):
    cursor = _cursor(line)
    ok, after = accept_number(cursor)
    assert not ok
    assert after == cursor


@pytest.mark.parametrize("line", ["", "3", "-", "3 x"])
def test_accept_identifier_failure_keeps_cursor(line):
    cursor = _cursor(line)
    ok, after = accept_identifier(cursor)
    assert not ok
    assert after == cursor


@pytest.mark.parametrize("line,char", [("", "="), ("x", "="), ("+", "-"), ("3", "^")])
def test_accept_character_failure_keeps_cursor(line, char):
    cursor = _cursor(line)
    ok, after = accept_character(cursor, char)
    assert not ok
    assert after == cursor


def test_atomic_acceptors_advance_by_one():
    cursor = _cursor("7 x =")
    ok, cursor = accept_number(cursor)
    assert ok and cursor.position == 1
    ok, cursor = accept_identifier(cursor)
    assert ok and cursor.position == 2
    ok, cursor = accept_character(cursor, "=")
    assert ok and cursor.at_end


# ── monomials ──────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "line,consumed",
    [
        ("3", 1),
        ("x", 1),
        ("3x", 2),
        ("x^2", 3),
        ("3x^2", 4),
        ("3 x ^ 2 + 1", 4),
        ("3 ^ 2", 1),       # no exponent on a bare number
    ],
)
def test_accept_monomial_forms(line, consumed):
    ok, cursor = accept_monomial(_cursor(line))
    assert ok
    assert cursor.position == consumed


def test_monomial_keeps_dangling_caret():
    ok, cursor = accept_monomial(_cursor("x ^ = 1"))
    assert ok
    assert cursor.current.is_symbol("=")


def test_monomial_rejects_symbol_start():
    cursor = _cursor("+ x")
    ok, after = accept_monomial(cursor)
    assert not ok
    assert after == cursor


# ── expressions ────────────────────────────────────────────────────────

@pytest.mark.parametrize("line", ["x", "-x", "3x^2 - 2x + 1", "-4 + y - 2y^3"])
def test_accept_expression_consumes_whole_sum(line):
    ok, cursor = accept_expression(_cursor(line))
    assert ok
    assert cursor.at_end


def test_expression_stops_before_non_operator():
    ok, cursor = accept_expression(_cursor("x + 1 = 2"))
    assert ok
    assert cursor.current.is_symbol("=")


def test_expression_leaves_trailing_operator():
    ok, cursor = accept_expression(_cursor("x + = 2"))
    assert ok
    assert cursor.position == 1
    assert cursor.current.is_symbol("+")


def test_leading_minus_stays_consumed_on_failure():
    ok, cursor = accept_expression(_cursor("- = 2"))
    assert not ok
    assert cursor.position == 1


def test_expression_without_leading_monomial_fails():
    ok, cursor = accept_expression(_cursor("+ x"))
    assert not ok
    assert cursor.position == 0


# ── equations ──────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "line,expected",
    [
        ("=", True),
        ("x = 1", True),
        ("x = 1 = 2", False),
        ("x + 1", False),
        ("", False),
    ],
)
def test_count_equals_exactly_one_always_exhausts(line, expected):
    ok, cursor = count_equals_exactly_one(_cursor(line))
    assert ok is expected
    assert cursor.at_end


@pytest.mark.parametrize(
    "line,expected",
    [
        ("x+3=7", True),
        ("x^2 - 4 = 0", True),
        ("-x = -3y^2 + 2", True),
        ("2x + 3y = 6", True),
        ("x=1=2", False),
        ("3 + 4", False),
        ("x + 3 = ", False),
        ("= 7", False),
        ("x = 1 +", False),
        ("x = 1 2", False),
        ("(x) = 1", False),
        ("2 * x = 1", False),
        ("x + = 1", False),
    ],
)
def test_accept_equation(line, expected):
    ok, _ = accept_equation(_cursor(line))
    assert ok is expected


def test_accept_equation_uses_separate_counter():
    stream = tokenize("x = 1")
    ok, cursor = accept_equation(stream.cursor(), stream.cursor())
    assert ok
    assert cursor.at_end
