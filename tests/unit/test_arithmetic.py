"""Unit tests for MathExpressionEvaluator."""

from __future__ import annotations

import pytest

from mustache_resolver.arithmetic import MathExpressionEvaluator
from mustache_resolver.exceptions import MathExpressionError, SecurityError


@pytest.fixture
def evaluator() -> MathExpressionEvaluator:
    return MathExpressionEvaluator()


class TestEvaluate:
    """Tests for arithmetic evaluation."""

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("2 + 3 * 4", 14),
            ("(2 + 3) * 4", 20),
            ("10 - 4 - 3", 3),
            ("-5 + 2", -3),
            ("2 * -3", -6),
            ("1.5 + 1", 2.5),
            ("", 0),
        ],
    )
    def test_results(
        self, evaluator: MathExpressionEvaluator, expression: str, expected: float
    ) -> None:
        assert evaluator.evaluate(expression) == expected

    def test_exact_division_stays_integral(
        self, evaluator: MathExpressionEvaluator
    ) -> None:
        result = evaluator.evaluate("12 / 4")

        assert result == 3
        assert isinstance(result, int)

    def test_inexact_division_is_float(
        self, evaluator: MathExpressionEvaluator
    ) -> None:
        assert evaluator.evaluate("10 / 4") == 2.5


class TestLimits:
    """Tests for rejected input."""

    def test_division_by_zero(self, evaluator: MathExpressionEvaluator) -> None:
        with pytest.raises(MathExpressionError, match="Division by zero"):
            evaluator.evaluate("10 / 0")

    def test_too_long(self, evaluator: MathExpressionEvaluator) -> None:
        with pytest.raises(MathExpressionError):
            evaluator.evaluate("1 + " * 125 + "1")

    def test_too_deep(self, evaluator: MathExpressionEvaluator) -> None:
        with pytest.raises(MathExpressionError):
            evaluator.evaluate("(" * 11 + "1" + ")" * 11)

    def test_ten_levels_allowed(self, evaluator: MathExpressionEvaluator) -> None:
        assert evaluator.evaluate("(" * 10 + "1" + ")" * 10) == 1

    @pytest.mark.parametrize("expression", ["2 ** 3", "abs(1)", "1; 2", "1 +"])
    def test_invalid_input(
        self, evaluator: MathExpressionEvaluator, expression: str
    ) -> None:
        with pytest.raises(MathExpressionError):
            evaluator.evaluate(expression)

    def test_missing_closing_parenthesis(
        self, evaluator: MathExpressionEvaluator
    ) -> None:
        with pytest.raises(MathExpressionError, match="missing closing parenthesis"):
            evaluator.evaluate("(1 + 2")

    def test_is_security_error(self) -> None:
        assert issubclass(MathExpressionError, SecurityError)


class TestHasExpression:
    def test_detects_operators(self, evaluator: MathExpressionEvaluator) -> None:
        assert evaluator.has_expression("1 + 1")
        assert not evaluator.has_expression("42")
