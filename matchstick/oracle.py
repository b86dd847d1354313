"""
Arithmetic Oracle - Decides whether an equation string is true.

Supported syntax:
- Non-negative integers (no leading zeros on multi-digit numbers)
- Binary operators + - x / with the usual precedence, left to right
- Signs directly in front of a number ("-1=1-2", "3x-1=-3", "-1=+-1"),
  as long as no sign repeats the one before it: "1--1" and "1++1" are
  rejected, "1x-+1" is not
- Exactly one '=' with an expression on both sides

Arithmetic is exact (fractions.Fraction); division by zero makes the
equation false.
"""

import logging
import re
from fractions import Fraction
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
OPERATORS = ("+", "-", "x", "/")

Token = Tuple[str, Union[str, Fraction]]

_WHITESPACE = re.compile(r"\s+")
_MULTIPLY = re.compile(r"[*×]")


class EquationError(ValueError):
    """Raised for expressions that cannot be evaluated."""


def normalize_equation(equation: str) -> str:
    """
    Normalize an equation string.

    Removes all whitespace and maps '*' and '×' to the 'x' glyph.
    """
    processed = _WHITESPACE.sub("", equation)
    return _MULTIPLY.sub("x", processed)


def tokenize(expression: str) -> List[Token]:
    """
    Split an expression into ('number', Fraction) and ('operator', str) tokens.

    Raises:
        EquationError: On characters outside the alphabet or leading zeros
    """
    tokens: List[Token] = []
    i = 0
    while i < len(expression):
        char = expression[i]
        if char in DIGITS:
            start = i
            while i < len(expression) and expression[i] in DIGITS:
                i += 1
            number = expression[start:i]
            if len(number) > 1 and number[0] == "0":
                raise EquationError(f"Leading zeros are not allowed: {number}")
            tokens.append(("number", Fraction(int(number))))
        elif char in OPERATORS:
            tokens.append(("operator", char))
            i += 1
        else:
            raise EquationError(f"Invalid character: {char!r}")
    return tokens


def _apply_signs(tokens: List[Token]) -> List[Token]:
    """Fold runs of unary signs into the number that follows them."""
    folded: List[Token] = []
    i = 0
    while i < len(tokens):
        kind, value = tokens[i]
        at_operand = not folded or folded[-1][0] == "operator"

        if kind == "operator" and value in ("+", "-") and at_operand:
            previous = folded[-1][1] if folded else None
            negative = False
            while i < len(tokens) and tokens[i][1] in ("+", "-"):
                sign = tokens[i][1]
                if sign == previous:
                    raise EquationError(f"Doubled operator: {sign}{sign}")
                negative ^= sign == "-"
                previous = sign
                i += 1
            if i >= len(tokens) or tokens[i][0] != "number":
                raise EquationError("Sign must be followed by a number")
            number = tokens[i][1]
            folded.append(("number", -number if negative else number))
            i += 1
            continue

        folded.append(tokens[i])
        i += 1
    return folded


def parse_expression(expression: str) -> Fraction:
    """
    Evaluate one side of an equation.

    Args:
        expression: Normalized expression without '='

    Returns:
        Exact value of the expression

    Raises:
        EquationError: If the expression is malformed or divides by zero
    """
    if not expression:
        raise EquationError("Empty expression")

    tokens = _apply_signs(tokenize(expression))

    # Numbers and operators must alternate, starting and ending with a number
    for index, (kind, _) in enumerate(tokens):
        expected = "number" if index % 2 == 0 else "operator"
        if kind != expected:
            raise EquationError("Operators cannot be placed next to each other")
    if tokens[-1][0] != "number":
        raise EquationError("Expression must end with a number")

    # First pass: x and /
    terms: List[Token] = [tokens[0]]
    for index in range(1, len(tokens), 2):
        operator = tokens[index][1]
        right = tokens[index + 1][1]
        if operator == "x":
            terms[-1] = ("number", terms[-1][1] * right)
        elif operator == "/":
            if right == 0:
                raise EquationError("Division by zero")
            terms[-1] = ("number", terms[-1][1] / right)
        else:
            terms.append(tokens[index])
            terms.append(tokens[index + 1])

    # Second pass: + and -
    value = terms[0][1]
    for index in range(1, len(terms), 2):
        operator = terms[index][1]
        right = terms[index + 1][1]
        value = value + right if operator == "+" else value - right
    return value


def evaluate_equation(equation: str) -> bool:
    """
    Check whether an equation is arithmetically true.

    Args:
        equation: Equation string, normalized or not

    Returns:
        True if both sides evaluate to the same value; False for false or
        malformed equations
    """
    normalized = normalize_equation(equation)
    sides = normalized.split("=")
    if len(sides) != 2:
        return False

    try:
        left = parse_expression(sides[0])
        right = parse_expression(sides[1])
    except EquationError as e:
        logger.debug(f"Rejected {normalized!r}: {e}")
        return False

    return left == right
