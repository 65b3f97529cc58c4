from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from domain import Domain, REAL

# =====================
# Node variants
# =====================


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def symbol(self) -> str:
        return self.value


class Func(Enum):
    SIN = "sin"
    COS = "cos"
    LN = "ln"
    EXP = "exp"
    # Reserved: never produced by the parser or the differentiator.
    NEGATE = "neg"


@dataclass(frozen=True)
class Node:
    def copy(self) -> "Node":
        raise NotImplementedError

    def to_string(self, domain: Domain = REAL) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Constant(Node):
    value: Any

    def copy(self) -> "Constant":
        return Constant(self.value)

    def to_string(self, domain: Domain = REAL) -> str:
        return domain.format(self.value)


@dataclass(frozen=True)
class Variable(Node):
    name: str

    def copy(self) -> "Variable":
        return Variable(self.name)

    def to_string(self, domain: Domain = REAL) -> str:
        return self.name


@dataclass(frozen=True)
class BinaryOp(Node):
    op: Op
    left: Node
    right: Node

    def copy(self) -> "BinaryOp":
        return BinaryOp(self.op, self.left.copy(), self.right.copy())

    def to_string(self, domain: Domain = REAL) -> str:
        return (
            "("
            + self.left.to_string(domain)
            + self.op.symbol
            + self.right.to_string(domain)
            + ")"
        )


@dataclass(frozen=True)
class Function(Node):
    func: Func
    arg: Node

    def copy(self) -> "Function":
        return Function(self.func, self.arg.copy())

    def to_string(self, domain: Domain = REAL) -> str:
        return f"{self.func.value}({self.arg.to_string(domain)})"


def is_constant(node: Node) -> bool:
    return isinstance(node, Constant)


# =====================
# Expression value wrapper
# =====================

Operand = Union["Expression", int, float, complex]


class Expression:
    """An expression tree over one numeric domain.

    Every combining operation deep-copies its operands, so no node is ever
    reachable from two live expressions. Expressions are never mutated;
    operators, function application and differentiation return new ones.
    """

    __slots__ = ("_root", "_domain")

    def __init__(self, root: Node, domain: Domain = REAL) -> None:
        self._root = root
        self._domain = domain

    @staticmethod
    def constant(value: Any, domain: Domain = REAL) -> "Expression":
        return Expression(Constant(domain.coerce(value)), domain)

    @staticmethod
    def variable(name: str, domain: Domain = REAL) -> "Expression":
        return Expression(Variable(name), domain)

    @property
    def root(self) -> Node:
        return self._root

    @property
    def domain(self) -> Domain:
        return self._domain

    def copy(self) -> "Expression":
        return Expression(self._root.copy(), self._domain)

    def _operand(self, other: Operand) -> Node:
        if isinstance(other, Expression):
            if other._domain is not self._domain:
                raise ValueError(
                    f"Cannot combine {self._domain.name} and {other._domain.name} expressions"
                )
            return other._root.copy()
        if isinstance(other, (int, float, complex)):
            return Constant(self._domain.coerce(other))
        raise TypeError(f"Unsupported operand {other!r}")

    def _binary(self, op: Op, other: Operand) -> "Expression":
        return Expression(BinaryOp(op, self._root.copy(), self._operand(other)), self._domain)

    def _rbinary(self, op: Op, other: Operand) -> "Expression":
        return Expression(BinaryOp(op, self._operand(other), self._root.copy()), self._domain)

    def __add__(self, other: Operand) -> "Expression":
        return self._binary(Op.ADD, other)

    def __sub__(self, other: Operand) -> "Expression":
        return self._binary(Op.SUB, other)

    def __mul__(self, other: Operand) -> "Expression":
        return self._binary(Op.MUL, other)

    def __truediv__(self, other: Operand) -> "Expression":
        return self._binary(Op.DIV, other)

    def __pow__(self, other: Operand) -> "Expression":
        return self._binary(Op.POW, other)

    # `^` mirrors the textual operator
    __xor__ = __pow__

    def pow(self, exponent: Operand) -> "Expression":
        return self._binary(Op.POW, exponent)

    def __radd__(self, other: Operand) -> "Expression":
        return self._rbinary(Op.ADD, other)

    def __rsub__(self, other: Operand) -> "Expression":
        return self._rbinary(Op.SUB, other)

    def __rmul__(self, other: Operand) -> "Expression":
        return self._rbinary(Op.MUL, other)

    def __rtruediv__(self, other: Operand) -> "Expression":
        return self._rbinary(Op.DIV, other)

    def __rpow__(self, other: Operand) -> "Expression":
        return self._rbinary(Op.POW, other)

    def _apply(self, func: Func) -> "Expression":
        return Expression(Function(func, self._root.copy()), self._domain)

    def sin(self) -> "Expression":
        return self._apply(Func.SIN)

    def cos(self) -> "Expression":
        return self._apply(Func.COS)

    def exp(self) -> "Expression":
        return self._apply(Func.EXP)

    def ln(self) -> "Expression":
        return self._apply(Func.LN)

    def eval(self, bindings: Optional[Dict[str, Any]] = None) -> Any:
        # Local import to avoid circular dependency at module load time
        from evaluator import evaluate

        return evaluate(self._root, bindings or {}, self._domain)

    def diff(self, var: str) -> "Expression":
        from derivative import differentiate

        return Expression(differentiate(self._root, var, self._domain), self._domain)

    def to_string(self) -> str:
        return self._root.to_string(self._domain)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Expression({self.to_string()!r}, domain={self._domain.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self._domain is other._domain and self._root == other._root

    def __hash__(self) -> int:
        return hash((self._domain.name, self._root))
