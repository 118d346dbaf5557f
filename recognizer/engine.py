"""Classify one line of input as a (non-)equation.

``classify_equation("x^2 - 4 = 0")`` scans the line once, then runs the
equation recognizer, the exponent check, the variable scan and the degree
scan, each on its own cursor over the same token stream.
"""

import logging

from recognizer.analysis import (
    compute_degree, single_variable_name, validate_exponents,
)
from recognizer.equation import accept_equation
from recognizer.scanner import tokenize
from recognizer.tokens import TokenStream

logger = logging.getLogger("recognizer")

NOT_AN_EQUATION = "this is not an equation"
AN_EQUATION = "this is an equation"
IN_ONE_VARIABLE = " in 1 variable of degree "
NOT_IN_ONE_VARIABLE = ", but not in 1 variable"

_DEGREE_NAMES = {
    0: "constant",
    1: "linear",
    2: "quadratic",
    3: "cubic",
    4: "quartic",
    5: "quintic",
}


def degree_name(degree: int) -> str:
    """Return the conventional name for a polynomial of the given degree."""
    return _DEGREE_NAMES.get(degree, f"degree-{degree} polynomial")


def format_verdict(result: dict) -> str:
    if not result["is_equation"]:
        return NOT_AN_EQUATION
    if result["single_variable"]:
        return f"{AN_EQUATION}{IN_ONE_VARIABLE}{result['degree']}"
    return f"{AN_EQUATION}{NOT_IN_ONE_VARIABLE}"


def classify_tokens(stream: TokenStream, equation: str = "") -> dict:
    result = {
        "equation": equation,
        "tokens": [str(token) for token in stream],
        "is_equation": False,
        "single_variable": False,
        "variable": None,
        "degree": None,
        "degree_name": None,
    }

    ok, _ = accept_equation(stream.cursor(), stream.cursor())
    if ok:
        ok, _ = validate_exponents(stream.cursor())
    if ok:
        result["is_equation"] = True
        variable, _ = single_variable_name(stream.cursor())
        if variable is not None:
            degree, _ = compute_degree(stream.cursor())
            result.update(
                single_variable=True,
                variable=variable,
                degree=degree,
                degree_name=degree_name(degree),
            )

    result["message"] = format_verdict(result)
    logger.debug("%r -> %s", equation, result["message"])
    return result


def classify_equation(equation_str: str) -> dict:
    """Classify one input line.

    Returns a dict with:
      - equation: the original line
      - tokens: the scanned tokens as strings
      - is_equation / single_variable: the two verdicts
      - variable, degree, degree_name: set only for one-variable equations
      - message: the verdict as printed by the line loop
    """
    try:
        stream = tokenize(equation_str)
    except ValueError as e:
        logger.debug("scan failed for %r: %s", equation_str, e)
        stream = TokenStream(())
    return classify_tokens(stream, equation_str)
