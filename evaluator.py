from __future__ import annotations
from typing import Any, Dict

from domain import Domain
from errors import EvalError, UnsupportedOperation
from expression import BinaryOp, Constant, Func, Function, Node, Op, Variable


def _bin(op: Op, a: Any, b: Any, domain: Domain) -> Any:
    if op is Op.ADD:
        return domain.add(a, b)
    if op is Op.SUB:
        return domain.sub(a, b)
    if op is Op.MUL:
        return domain.mul(a, b)
    if op is Op.DIV:
        if domain.is_zero(b):
            raise EvalError("division by zero")
        return domain.div(a, b)
    if op is Op.POW:
        return domain.power(a, b)
    raise UnsupportedOperation(f"Unsupported binary op {op}")


def _call(func: Func, v: Any, domain: Domain) -> Any:
    if func is Func.SIN:
        return domain.sin(v)
    if func is Func.COS:
        return domain.cos(v)
    if func is Func.EXP:
        return domain.exp(v)
    if func is Func.LN:
        if not domain.in_log_domain(v):
            raise EvalError("logarithm domain error")
        return domain.ln(v)
    raise UnsupportedOperation(f"Unsupported function {func.value}")


def evaluate(node: Node, bindings: Dict[str, Any], domain: Domain) -> Any:
    """Evaluate ``node`` with variables looked up in ``bindings``.

    Binding values are coerced into ``domain``. Under the complex domain the
    name ``i`` always means the imaginary unit, whatever the bindings say.
    """
    if isinstance(node, Constant):
        return node.value
    if isinstance(node, Variable):
        unit = domain.imaginary_unit()
        if unit is not None and node.name == "i":
            return unit
        if node.name not in bindings:
            raise EvalError(f"variable not found: {node.name}")
        return domain.coerce(bindings[node.name])
    if isinstance(node, BinaryOp):
        a = evaluate(node.left, bindings, domain)
        b = evaluate(node.right, bindings, domain)
        return _bin(node.op, a, b, domain)
    if isinstance(node, Function):
        return _call(node.func, evaluate(node.arg, bindings, domain), domain)
    raise UnsupportedOperation(f"Unknown node {type(node).__name__}")
