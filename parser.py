from __future__ import annotations
import logging
from typing import List

from domain import Domain, REAL
from errors import ParseError
from expression import BinaryOp, Constant, Expression, Func, Function, Node, Op, Variable

logger = logging.getLogger(__name__)

# =====================
# Operator-precedence (shunting-yard) parser
# =====================

_prec = {"^": 4, "*": 3, "/": 3, "+": 2, "-": 2}
_ops = {"+": Op.ADD, "-": Op.SUB, "*": Op.MUL, "/": Op.DIV, "^": Op.POW}
_funcs = {"sin": Func.SIN, "cos": Func.COS, "exp": Func.EXP, "ln": Func.LN}


class _State:
    def __init__(self) -> None:
        self.values: List[Node] = []
        self.ops: List[str] = []
        self.funcs: List[str] = []

    def apply_op(self) -> None:
        op = self.ops.pop()
        if len(self.values) < 2:
            raise ParseError(f"missing operand for '{op}'")
        b = self.values.pop()
        a = self.values.pop()
        logger.debug("apply %s", op)
        self.values.append(BinaryOp(_ops[op], a, b))

    def apply_func(self) -> None:
        name = self.funcs.pop()
        if not self.values:
            raise ParseError(f"missing argument for function '{name}'")
        logger.debug("apply %s()", name)
        self.values.append(Function(_funcs[name], self.values.pop()))


def parse_tree(text: str, domain: Domain = REAL) -> Node:
    """Parse infix ``text`` into a node tree whose constants live in ``domain``.

    Operators of equal precedence, ``^`` included, group to the left, so
    ``2^3^2`` reads as ``(2^3)^2``. A ``)`` applies the most recently seen
    pending function name, if any, to the value it just closed.
    """
    s = text
    i, n = 0, len(s)
    st = _State()
    while i < n:
        c = s[i]
        if c.isspace():
            i += 1
            continue
        if c.isdigit() or c == ".":
            j = i
            has_dot = False
            while j < n and (s[j].isdigit() or (s[j] == "." and not has_dot)):
                has_dot = has_dot or s[j] == "."
                j += 1
            num_str = s[i:j]
            try:
                value = domain.from_literal(num_str)
            except ValueError:
                raise ParseError(f"invalid number '{num_str}'") from None
            st.values.append(Constant(value))
            i = j
            continue
        if c.isalpha():
            j = i
            while j < n and s[j].isalpha():
                j += 1
            name = s[i:j]
            if name in _funcs:
                st.funcs.append(name)
            else:
                st.values.append(Variable(name))
            i = j
            continue
        if c == "(":
            st.ops.append(c)
            i += 1
            continue
        if c == ")":
            while st.ops and st.ops[-1] != "(":
                st.apply_op()
            if not st.ops:
                raise ParseError("unmatched parentheses")
            st.ops.pop()
            if st.funcs:
                st.apply_func()
            i += 1
            continue
        if c in _prec:
            while st.ops and st.ops[-1] != "(" and _prec[st.ops[-1]] >= _prec[c]:
                st.apply_op()
            st.ops.append(c)
            i += 1
            continue
        raise ParseError(f"invalid character '{c}' at position {i}")
    while st.ops:
        if st.ops[-1] == "(":
            raise ParseError("unmatched parentheses")
        st.apply_op()
    if st.funcs:
        raise ParseError(f"dangling function '{st.funcs[-1]}'")
    if len(st.values) != 1:
        raise ParseError("invalid expression")
    return st.values[-1]


def parse(text: str, domain: Domain = REAL) -> Expression:
    return Expression(parse_tree(text, domain), domain)
