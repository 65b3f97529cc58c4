from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from complex_literal import detect_domain, parse_value
from domain import Domain
from edag import depth, node_count
from errors import EvalError
from expression import Expression
from parser import parse

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 11


class CAS:
    def __init__(self, domain: Optional[Domain] = None) -> None:
        self.domain = domain

    def _wrap(self, obj: Any) -> "CAS.ExprResult":
        if isinstance(obj, Expression):
            return CAS.ExprResult(obj)
        if isinstance(obj, CAS.ExprResult):
            return obj
        raise TypeError("Unsupported object for wrapping")

    def parse(self, expr: str) -> "CAS.ExprResult":
        domain = self.domain or detect_domain(expr)
        logger.debug("parsing %r over the %s domain", expr, domain.name)
        return self._wrap(parse(expr, domain))

    class ExprResult:
        def __init__(self, expr: Expression) -> None:
            self._expr = expr

        @property
        def expression(self) -> Expression:
            return self._expr

        @property
        def domain(self) -> Domain:
            return self._expr.domain

        def _env(self, env: Dict[str, Any]) -> Dict[str, Any]:
            return {
                k: (parse_value(v, self.domain) if isinstance(v, str) else v)
                for k, v in env.items()
            }

        def eval(self, env: Dict[str, Any] | None = None) -> Any:
            return self._expr.eval(self._env(env or {}))

        def derivative(self, var: str) -> "CAS.ExprResult":
            return CAS.ExprResult(self._expr.diff(var))

        def __str__(self) -> str:
            return self._expr.to_string()

        def sample(
            self,
            var: str,
            lo: float,
            hi: float,
            n: int = DEFAULT_SAMPLES,
            env: Dict[str, Any] | None = None,
        ) -> List[Tuple[float, Any]]:
            """Evaluate at ``n`` evenly spaced points of ``var`` in [lo, hi].

            Points where evaluation fails (division by zero, log of a
            non-positive real) are left out of the result.
            """
            base = self._env(env or {})
            out: List[Tuple[float, Any]] = []
            for x in np.linspace(lo, hi, n).tolist():
                base[var] = x
                try:
                    out.append((x, self._expr.eval(base)))
                except EvalError as e:
                    logger.debug("skipping %s=%g: %s", var, x, e)
            return out

        def stats(self) -> Dict[str, int]:
            return {"nodes": node_count(self._expr), "depth": depth(self._expr)}
