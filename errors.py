from __future__ import annotations


class SymbolicError(Exception):
    """Base class for every error raised by the expression engine."""


class ParseError(SymbolicError, ValueError):
    pass


class EvalError(SymbolicError, ArithmeticError):
    pass


class UnsupportedOperation(SymbolicError, NotImplementedError):
    """A node carries a tag that evaluate/diff do not know about."""
