"""Tests for the arithmetic evaluator."""

import pytest

from codevanta.console.interpreters import arithmetic
from codevanta.console.interpreters.arithmetic import ExpressionError, evaluate, is_arithmetic


class TestIsArithmetic:
    """Tests for the character filter."""

    def test_accepts_numbers_and_operators(self):
        assert is_arithmetic("1 + 2 * (3 - 4) / 5.5")

    def test_rejects_names(self):
        assert not is_arithmetic("x + 1")
        assert not is_arithmetic("__import__('os')")

    def test_rejects_empty(self):
        assert not is_arithmetic("")


class TestEvaluate:
    """Tests for evaluate."""

    def test_precedence(self):
        assert evaluate("2 + 3 * 4") == 14
        assert evaluate("(2 + 3) * 4") == 20

    def test_left_associative(self):
        assert evaluate("10 - 4 - 3") == 3
        assert evaluate("16 / 4 / 2") == 2.0

    def test_integer_results_stay_int(self):
        result = evaluate("6 * 7")

        assert result == 42
        assert isinstance(result, int)

    def test_division_is_true_division(self):
        result = evaluate("10 / 2")

        assert result == 5.0
        assert isinstance(result, float)

    def test_unary_minus(self):
        assert evaluate("-3 + -(-2)") == -1

    def test_float_literals(self):
        assert evaluate("1.5 + .5") == 2.0

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            evaluate("1 / 0")

    @pytest.mark.parametrize("text", ["", "1 +", "(1 + 2", "1 2", "()", "1..2"])
    def test_malformed(self, text):
        with pytest.raises(ExpressionError):
            evaluate(text)

    def test_expression_error_is_value_error(self):
        assert issubclass(arithmetic.ExpressionError, ValueError)
