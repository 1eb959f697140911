# plandash/util/scalar.py
from __future__ import annotations

import math
import re
from typing import List, Union

Scalar = Union[None, bool, int, float, str, List["Scalar"]]

_NULL_TOKENS = {"", "null", "~"}

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def _parse_number(s: str) -> int | float | None:
    if _PREFIXED_RE.match(s):
        return int(s, 0)
    if _INT_RE.match(s):
        try:
            return int(s)
        except ValueError:
            # beyond the interpreter's int string-conversion limit
            return None
    if _FLOAT_RE.match(s):
        v = float(s)
        return v if math.isfinite(v) else None
    return None


def parse_value(token: str) -> Scalar:
    """Convert one scalar token into a typed value.

    Order matters: null words, booleans, quoted strings, inline lists,
    numbers, then the raw token. Inline lists split on every comma, so
    nested brackets and quoted commas inside a list are not supported.
    """
    s = token.strip()
    if s in _NULL_TOKENS:
        return None
    if s == "true":
        return True
    if s == "false":
        return False
    if s.startswith('"') and s.endswith('"'):
        return s[1:-1]
    if s.startswith("'") and s.endswith("'"):
        return s[1:-1]
    if s.startswith("[") and s.endswith("]"):
        inner = s[1:-1]
        if inner == "":
            return []
        return [parse_value(part.strip()) for part in inner.split(",")]
    n = _parse_number(s)
    if n is not None:
        return n
    return s


def scalar_text(v: object) -> str | None:
    """Display form of a parsed scalar (None stays None)."""
    if v is None:
        return None
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, list):
        return ", ".join(t for t in (scalar_text(x) for x in v) if t is not None)
    return str(v)
