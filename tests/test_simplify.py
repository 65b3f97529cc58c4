import pytest

from domain import COMPLEX
from errors import EvalError
from expression import BinaryOp, Constant, Op, Variable
from simplify import simplify_add, simplify_divide, simplify_multiply, simplify_power

x = Variable("x")
y = Variable("y")
ZERO = Constant(0.0)
ONE = Constant(1.0)


class TestAdd:
    def test_zero_left_returns_right(self):
        right = Variable("x")
        assert simplify_add(ZERO, right) is right

    def test_zero_right_returns_left(self):
        assert simplify_add(x, ZERO) is x

    def test_constants_fold(self):
        assert simplify_add(Constant(2.0), Constant(3.0)) == Constant(5.0)

    def test_builds_node(self):
        assert simplify_add(x, y) == BinaryOp(Op.ADD, x, y)

    def test_complex_zero(self):
        assert simplify_add(Constant(0j), x, COMPLEX) is x


class TestMultiply:
    def test_one_is_identity(self):
        assert simplify_multiply(ONE, x) is x
        assert simplify_multiply(x, ONE) is x

    def test_zero_annihilates(self):
        assert simplify_multiply(x, ZERO) == Constant(0.0)
        assert simplify_multiply(ZERO, x) == Constant(0.0)

    def test_constants_fold(self):
        assert simplify_multiply(Constant(2.0), Constant(3.0)) == Constant(6.0)

    def test_builds_node(self):
        assert simplify_multiply(Constant(2.0), x) == BinaryOp(Op.MUL, Constant(2.0), x)


class TestDivide:
    def test_divide_by_one(self):
        assert simplify_divide(x, ONE) is x

    def test_zero_numerator(self):
        assert simplify_divide(ZERO, x) == Constant(0.0)

    def test_constants_fold(self):
        assert simplify_divide(Constant(6.0), Constant(3.0)) == Constant(2.0)

    def test_constant_division_by_zero(self):
        with pytest.raises(EvalError, match="division by zero"):
            simplify_divide(Constant(1.0), ZERO)

    def test_builds_node(self):
        assert simplify_divide(x, y) == BinaryOp(Op.DIV, x, y)


class TestPower:
    def test_exponent_one(self):
        assert simplify_power(x, ONE) is x

    def test_exponent_zero(self):
        assert simplify_power(x, ZERO) == Constant(1.0)

    def test_constants_fold(self):
        assert simplify_power(Constant(2.0), Constant(3.0)) == Constant(8.0)

    def test_complex_constants_fold(self):
        folded = simplify_power(Constant(1j), Constant(complex(2, 0)), COMPLEX)
        assert folded.value == pytest.approx(-1)

    def test_builds_node(self):
        assert simplify_power(x, Constant(2.0)) == BinaryOp(Op.POW, x, Constant(2.0))


@pytest.mark.parametrize(
    "rule, left, right, identity_on_right",
    [
        (simplify_add, x, ZERO, ZERO),
        (simplify_add, x, y, ZERO),
        (simplify_multiply, ONE, x, ONE),
        (simplify_multiply, x, ZERO, ONE),
        (simplify_multiply, Constant(2.0), x, ONE),
        (simplify_divide, x, ONE, ONE),
        (simplify_divide, x, y, ONE),
        (simplify_power, x, ONE, ONE),
        (simplify_power, x, Constant(3.0), ONE),
    ],
)
def test_resimplifying_keeps_shape(rule, left, right, identity_on_right):
    once = rule(left, right)
    assert rule(once, identity_on_right) == once
