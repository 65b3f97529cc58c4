from __future__ import annotations
import logging

from domain import Domain, REAL
from errors import UnsupportedOperation
from expression import BinaryOp, Constant, Func, Function, Node, Op, Variable
from simplify import simplify_add, simplify_divide, simplify_multiply, simplify_power

logger = logging.getLogger(__name__)


def differentiate(node: Node, var: str, domain: Domain = REAL) -> Node:
    """Symbolic derivative of ``node`` with respect to ``var``.

    Operands are copied wherever they are reused, so the returned tree shares
    no nodes with the input. Every intermediate result goes through one of
    the local simplify rules.
    """
    zero = domain.zero
    one = domain.one
    minus_one = domain.coerce(-1)
    two = domain.coerce(2)

    def add(l: Node, r: Node) -> Node:
        return simplify_add(l, r, domain)

    def mul(l: Node, r: Node) -> Node:
        return simplify_multiply(l, r, domain)

    def div(l: Node, r: Node) -> Node:
        return simplify_divide(l, r, domain)

    def pw(b: Node, e: Node) -> Node:
        return simplify_power(b, e, domain)

    def d(n: Node) -> Node:
        if isinstance(n, Constant):
            return Constant(zero)
        if isinstance(n, Variable):
            return Constant(one if n.name == var else zero)
        if isinstance(n, BinaryOp):
            u, v = n.left, n.right
            if n.op is Op.ADD:
                return add(d(u), d(v))
            if n.op is Op.SUB:
                return add(d(u), mul(Constant(minus_one), d(v)))
            if n.op is Op.MUL:
                return add(mul(d(u), v.copy()), mul(u.copy(), d(v)))
            if n.op is Op.DIV:
                num = add(
                    mul(d(u), v.copy()),
                    mul(Constant(minus_one), mul(u.copy(), d(v))),
                )
                den = pw(v.copy(), Constant(two))
                return div(num, den)
            if n.op is Op.POW:
                # general a^b: a^b * ( db*ln(a) + b*(da/a) )
                du = d(u)
                dv = d(v)
                term1 = mul(dv, Function(Func.LN, u.copy()))
                term2 = mul(v.copy(), div(du, u.copy()))
                return mul(pw(u.copy(), v.copy()), add(term1, term2))
            raise UnsupportedOperation(f"Unsupported binary op for diff: {n.op}")
        if isinstance(n, Function):
            u = n.arg
            du = d(u)
            if n.func is Func.SIN:
                return mul(Function(Func.COS, u.copy()), du)
            if n.func is Func.COS:
                return mul(mul(Constant(minus_one), Function(Func.SIN, u.copy())), du)
            if n.func is Func.EXP:
                return mul(Function(Func.EXP, u.copy()), du)
            if n.func is Func.LN:
                return mul(div(Constant(one), u.copy()), du)
            raise UnsupportedOperation(f"Unsupported function for diff: {n.func.value}")
        raise UnsupportedOperation(f"Unknown node {type(n).__name__}")

    result = d(node)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("d/d%s %s = %s", var, node.to_string(domain), result.to_string(domain))
    return result
