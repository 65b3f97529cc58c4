import math

import pytest

from domain import COMPLEX, REAL
from errors import EvalError, UnsupportedOperation
from evaluator import evaluate
from expression import Constant, Func, Function
from parser import parse


def test_division_by_zero():
    with pytest.raises(EvalError, match="division by zero"):
        parse("1 / 0").eval({})


def test_division_by_tiny_number_is_allowed():
    assert parse("1 / x").eval({"x": 1e-300}) == pytest.approx(1e300)


def test_missing_variable():
    with pytest.raises(EvalError, match="variable not found: x"):
        parse("x + 1").eval({})


@pytest.mark.parametrize("value", [0, -1])
def test_real_log_domain_error(value):
    with pytest.raises(EvalError, match="logarithm domain error"):
        parse("ln(x)").eval({"x": value})


def test_complex_log_of_negative():
    assert parse("ln(x)", COMPLEX).eval({"x": -1}) == pytest.approx(complex(0, math.pi))


def test_bindings_are_coerced():
    result = parse("x * 2").eval({"x": 3})
    assert isinstance(result, float)
    assert result == 6


def test_generalized_power():
    assert parse("2 ^ 0.5").eval() == pytest.approx(math.sqrt(2))


def test_real_root_of_negative_is_nan():
    assert math.isnan(parse("(0 - 8) ^ (1 / 3)").eval())


class TestComplex:
    def test_i_is_imaginary_unit(self):
        assert parse("i * i", COMPLEX).eval() == -1

    def test_i_ignores_bindings(self):
        assert parse("i", COMPLEX).eval({"i": 5}) == 1j

    def test_i_is_plain_variable_over_reals(self):
        assert parse("i").eval({"i": 2}) == 2

    def test_integer_power_of_i(self):
        assert parse("i ^ 2", COMPLEX).eval() == pytest.approx(-1)

    def test_complex_bindings(self):
        assert parse("x * y", COMPLEX).eval({"x": 1 + 2j, "y": 2}) == 2 + 4j

    def test_trig(self):
        assert parse("exp(i * x)", COMPLEX).eval({"x": math.pi}) == pytest.approx(-1)


def test_unknown_function_tag():
    with pytest.raises(UnsupportedOperation):
        evaluate(Function(Func.NEGATE, Constant(1.0)), {}, REAL)


def test_unknown_node_type():
    with pytest.raises(UnsupportedOperation):
        evaluate(object(), {}, REAL)
