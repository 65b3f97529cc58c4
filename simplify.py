from __future__ import annotations

from domain import Domain, REAL
from errors import EvalError
from expression import BinaryOp, Constant, Node, Op, is_constant

# Local rewrites applied while the derivative tree is being built.
# Each call looks at its two children only; nothing is re-simplified
# further down the tree.


def _is_zero(node: Node, domain: Domain) -> bool:
    return is_constant(node) and domain.is_zero(node.value)


def _is_one(node: Node, domain: Domain) -> bool:
    return is_constant(node) and domain.is_one(node.value)


def simplify_add(left: Node, right: Node, domain: Domain = REAL) -> Node:
    if _is_zero(left, domain):
        return right
    if _is_zero(right, domain):
        return left
    if is_constant(left) and is_constant(right):
        return Constant(domain.add(left.value, right.value))
    return BinaryOp(Op.ADD, left, right)


def simplify_multiply(left: Node, right: Node, domain: Domain = REAL) -> Node:
    if _is_one(left, domain):
        return right
    if _is_one(right, domain):
        return left
    if _is_zero(left, domain) or _is_zero(right, domain):
        return Constant(domain.zero)
    if is_constant(left) and is_constant(right):
        return Constant(domain.mul(left.value, right.value))
    return BinaryOp(Op.MUL, left, right)


def simplify_divide(left: Node, right: Node, domain: Domain = REAL) -> Node:
    if _is_one(right, domain):
        return left
    if _is_zero(left, domain):
        return Constant(domain.zero)
    if is_constant(left) and is_constant(right):
        if domain.is_zero(right.value):
            raise EvalError("division by zero")
        return Constant(domain.div(left.value, right.value))
    return BinaryOp(Op.DIV, left, right)


def simplify_power(base: Node, exponent: Node, domain: Domain = REAL) -> Node:
    if _is_one(exponent, domain):
        return base
    if _is_zero(exponent, domain):
        return Constant(domain.one)
    if is_constant(base) and is_constant(exponent):
        return Constant(domain.power(base.value, exponent.value))
    return BinaryOp(Op.POW, base, exponent)
