#!/usr/bin/env python3
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from cas import CAS
from complex_literal import is_complex, parse_value
from domain import COMPLEX, REAL, get_domain
from errors import SymbolicError

logger = logging.getLogger(__name__)

DEFAULT_VAR = "x"
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def split_bindings(tokens: List[str]) -> Dict[str, str]:
    """Split ``name=value`` tokens into a mapping, rejecting duplicate names."""
    out: Dict[str, str] = {}
    for tok in tokens:
        name, sep, value = tok.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected name=value, got '{tok}'")
        if name in out:
            raise ValueError(f"Duplicate variable '{name}'")
        out[name] = value.strip()
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symdiff", description="Evaluate or differentiate a math expression."
    )
    parser.add_argument("mode", choices=["evaluate", "differentiate"])
    parser.add_argument("expression")
    parser.add_argument("bindings", nargs="*", metavar="name=value")
    parser.add_argument(
        "-v", "--var", default=DEFAULT_VAR, help="variable to differentiate by"
    )
    parser.add_argument(
        "--domain", choices=["auto", "real", "complex"], default="auto"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=os.environ.get("SYMDIFF_LOG_LEVEL", "WARNING").upper(),
    )
    parser.add_argument(
        "--stats", action="store_true", help="print size and depth of the result tree"
    )
    return parser


def run(args: argparse.Namespace) -> None:
    raw = split_bindings(args.bindings)
    if args.domain == "auto":
        complex_input = is_complex(args.expression) or any(
            is_complex(v) for v in raw.values()
        )
        domain = COMPLEX if complex_input else REAL
    else:
        domain = get_domain(args.domain)
    env = {k: parse_value(v, domain) for k, v in raw.items()}
    logger.debug("mode=%s domain=%s vars=%s", args.mode, domain.name, sorted(env))

    result = CAS(domain).parse(args.expression)
    if args.mode == "differentiate":
        result = result.derivative(args.var)
        print(result)
        if env:
            print(domain.format(result.eval(env)))
    else:
        print(domain.format(result.eval(env)))
    if args.stats:
        stats = result.stats()
        print(f"nodes={stats['nodes']} depth={stats['depth']}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    try:
        run(args)
    except (SymbolicError, ValueError) as e:
        logger.debug("failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
