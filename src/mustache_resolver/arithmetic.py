"""Bounded arithmetic evaluation without ``eval``.

Only ``+ - * /``, unary signs, parentheses and decimal literals are
accepted. Expressions are limited in length and parenthesis depth.

Grammar::

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := ('-' | '+') factor | '(' expr ')' | number
"""

from __future__ import annotations

import re

from mustache_resolver.constants import MATH_MAX_DEPTH, MATH_MAX_LENGTH
from mustache_resolver.exceptions import MathExpressionError

__all__ = ["MathExpressionEvaluator", "Number"]

Number = int | float

_DISALLOWED = re.compile(r"[^0-9\s+\-*/().]")
_OPERATORS = re.compile(r"[+\-*/()]")


def _divide(left: Number, right: Number) -> Number:
    # Integer division stays integral only when exact
    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


class _Parser:
    """Single-use recursive-descent parser over a sanitized expression."""

    def __init__(self, expression: str, max_depth: int) -> None:
        self.text = expression
        self.position = 0
        self.depth = 0
        self.max_depth = max_depth

    def _skip_whitespace(self) -> None:
        while self.position < len(self.text) and self.text[self.position].isspace():
            self.position += 1

    def _peek(self) -> str | None:
        self._skip_whitespace()
        if self.position < len(self.text):
            return self.text[self.position]
        return None

    def parse(self) -> Number:
        result = self._expression()
        trailing = self._peek()
        if trailing is not None:
            raise MathExpressionError.invalid_operator(self.text, trailing)
        return result

    def _expression(self) -> Number:
        left = self._term()
        while (operator := self._peek()) in ("+", "-"):
            self.position += 1
            right = self._term()
            left = left + right if operator == "+" else left - right
        return left

    def _term(self) -> Number:
        left = self._factor()
        while (operator := self._peek()) in ("*", "/"):
            self.position += 1
            right = self._factor()
            if operator == "*":
                left = left * right
            elif right == 0:
                raise MathExpressionError.division_by_zero(self.text)
            else:
                left = _divide(left, right)
        return left

    def _factor(self) -> Number:
        char = self._peek()
        if char == "-":
            self.position += 1
            return -self._factor()
        if char == "+":
            self.position += 1
            return self._factor()
        if char == "(":
            self.depth += 1
            if self.depth > self.max_depth:
                raise MathExpressionError.too_deep(self.text, self.max_depth)
            self.position += 1
            result = self._expression()
            if self._peek() != ")":
                raise MathExpressionError.invalid_operator(
                    self.text, "missing closing parenthesis"
                )
            self.position += 1
            self.depth -= 1
            return result
        return self._number()

    def _number(self) -> Number:
        self._skip_whitespace()
        start = self.position
        has_decimal = False
        while self.position < len(self.text):
            char = self.text[self.position]
            if char.isdigit():
                self.position += 1
            elif char == "." and not has_decimal:
                has_decimal = True
                self.position += 1
            else:
                break

        if start == self.position:
            raise MathExpressionError.invalid_operator(
                self.text, f"expected number at position {self.position}"
            )

        literal = self.text[start : self.position]
        if not has_decimal:
            return int(literal)
        return float(literal) if literal != "." else 0.0


class MathExpressionEvaluator:
    """Evaluates arithmetic source text.

    Integer operands stay integers under ``+ - *``; any float operand makes
    the result a float. Division returns an int when it is exact and a float
    otherwise.

    Example:
        >>> evaluator = MathExpressionEvaluator()
        >>> evaluator.evaluate("12 / 4"), evaluator.evaluate("10 / 4")
        (3, 2.5)
    """

    def __init__(
        self,
        max_length: int = MATH_MAX_LENGTH,
        max_depth: int = MATH_MAX_DEPTH,
    ) -> None:
        self.max_length = max_length
        self.max_depth = max_depth

    def evaluate(self, expression: str) -> Number:
        """Evaluate ``expression``. Blank input evaluates to 0.

        Raises:
            MathExpressionError: For disallowed characters, overlong or
                overly nested input, malformed syntax or division by zero.
        """
        disallowed = _DISALLOWED.findall(expression)
        if disallowed:
            raise MathExpressionError.invalid_operator(expression, "".join(disallowed))

        expression = expression.strip()
        if len(expression) > self.max_length:
            raise MathExpressionError.too_long(expression, self.max_length)
        if not expression:
            return 0

        return _Parser(expression, self.max_depth).parse()

    def has_expression(self, value: str) -> bool:
        """True when ``value`` contains an arithmetic operator or parenthesis."""
        return _OPERATORS.search(value) is not None
