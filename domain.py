from __future__ import annotations
from typing import Any, Optional
import numpy as np

# Numeric domains an expression can be evaluated over.
# Every other module talks to numbers only through these methods.

class Domain:
	name = ""
	zero: Any = None
	one: Any = None
	def coerce(self, value: Any) -> Any:
		raise NotImplementedError
	def from_literal(self, text: str) -> Any:
		return self.coerce(float(text))
	def add(self, a: Any, b: Any) -> Any:
		return a + b
	def sub(self, a: Any, b: Any) -> Any:
		return a - b
	def mul(self, a: Any, b: Any) -> Any:
		return a * b
	def div(self, a: Any, b: Any) -> Any:
		return a / b
	def power(self, base: Any, exponent: Any) -> Any:
		with np.errstate(all="ignore"):
			return self.coerce(np.power(base, exponent))
	def sin(self, v: Any) -> Any:
		return self.coerce(np.sin(v))
	def cos(self, v: Any) -> Any:
		return self.coerce(np.cos(v))
	def exp(self, v: Any) -> Any:
		with np.errstate(all="ignore"):
			return self.coerce(np.exp(v))
	def ln(self, v: Any) -> Any:
		with np.errstate(all="ignore"):
			return self.coerce(np.log(v))
	def is_zero(self, v: Any) -> bool:
		return v == self.zero
	def is_one(self, v: Any) -> bool:
		return v == self.one
	def in_log_domain(self, v: Any) -> bool:
		return True
	def imaginary_unit(self) -> Optional[Any]:
		return None
	def format(self, v: Any) -> str:
		raise NotImplementedError
	def __repr__(self) -> str:
		return f"<{self.name} domain>"

class RealDomain(Domain):
	name = "real"
	zero = 0.0
	one = 1.0
	def coerce(self, value: Any) -> float:
		return float(value)
	def in_log_domain(self, v: float) -> bool:
		return v > 0
	def format(self, v: float) -> str:
		if v.is_integer():
			return "%d" % v
		return repr(v)

class ComplexDomain(Domain):
	name = "complex"
	zero = complex(0, 0)
	one = complex(1, 0)
	def coerce(self, value: Any) -> complex:
		return complex(value)
	def power(self, base: complex, exponent: complex) -> complex:
		# numpy keeps integer powers of i exact (i^2 == -1+0j)
		with np.errstate(all="ignore"):
			return complex(np.power(np.complex128(base), np.complex128(exponent)))
	def imaginary_unit(self) -> complex:
		return complex(0, 1)
	def format(self, v: complex) -> str:
		if v.imag == 0:
			return REAL.format(v.real)
		re_part = REAL.format(v.real)
		im_part = REAL.format(abs(v.imag))
		sign = "-" if v.imag < 0 else "+"
		return f"({re_part}{sign}{im_part}*i)"

REAL = RealDomain()
COMPLEX = ComplexDomain()

_domains = {"real": REAL, "complex": COMPLEX}

def get_domain(name: str) -> Domain:
	try:
		return _domains[name.lower()]
	except KeyError:
		raise ValueError(f"Unknown domain {name}") from None
