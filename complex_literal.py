from __future__ import annotations
from typing import Any

from domain import COMPLEX, REAL, Domain
from errors import ParseError


def is_complex(text: str) -> bool:
    """True when ``text`` holds a free-standing ``i`` token.

    An ``i`` that touches another letter belongs to an identifier (``sin``,
    ``pi``). Otherwise the ``i`` counts when the character before it is the
    start of text, whitespace, a digit, ``-`` or ``.``, and the character after
    it is the end of text, whitespace or a digit.
    """
    s = text
    n = len(s)
    pos = s.find("i")
    while pos != -1:
        before = s[pos - 1] if pos > 0 else ""
        after = s[pos + 1] if pos < n - 1 else ""
        if not before.isalpha() and not after.isalpha():
            left_ok = before == "" or before.isspace() or before.isdigit() or before in "-."
            right_ok = after == "" or after.isspace() or after.isdigit()
            if left_ok and right_ok:
                return True
        pos = s.find("i", pos + 1)
    return False


def detect_domain(text: str) -> Domain:
    return COMPLEX if is_complex(text) else REAL


def parse_complex_literal(text: str) -> complex:
    s = text.strip()
    i_pos = s.find("i")
    try:
        if i_pos == -1:
            return complex(float(s), 0.0)
        if s[i_pos + 1:].strip():
            raise ValueError(s)
        sign_pos = max(s.rfind("+", 0, i_pos), s.rfind("-", 0, i_pos))
        if sign_pos == -1:
            real_part, imag_part = "", s[:i_pos]
        else:
            real_part, imag_part = s[:sign_pos], s[sign_pos:i_pos]
        imag_part = imag_part.strip().replace(" ", "")
        real = float(real_part) if real_part.strip() else 0.0
        if imag_part in ("", "+"):
            imag = 1.0
        elif imag_part == "-":
            imag = -1.0
        else:
            imag = float(imag_part)
    except ValueError:
        raise ParseError(f"invalid complex literal '{text}'") from None
    return complex(real, imag)


def parse_value(text: str, domain: Domain) -> Any:
    """Parse a binding value such as ``2.5`` or ``1-3i`` for ``domain``."""
    if domain is COMPLEX:
        return parse_complex_literal(text)
    try:
        return domain.coerce(float(text))
    except ValueError:
        raise ParseError(f"invalid number '{text}'") from None
