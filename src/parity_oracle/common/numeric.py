"""Numeric input checks and formatting of numbers for the prompt."""
from __future__ import annotations
import math
import re
from typing import Any, Union

Numeric = Union[int, float, str]

# Above this, integral floats are shown in exponent form.
_PLAIN_INTEGER_LIMIT = 1e21

# Plain ASCII decimal literal: no digit separators, no inf/nan words.
_FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

def _parse_float(text: str) -> float | None:
    text = text.strip()
    if not _FLOAT_LITERAL.fullmatch(text):
        return None
    return float(text)

def is_numeric(value: Any) -> bool:
    """
    Return True for finite floats, ints and strings holding a finite float.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        parsed = _parse_float(value)
        return parsed is not None and math.isfinite(parsed)
    return False

def canonical_text(value: Numeric) -> str:
    """Canonical decimal string of an already validated value."""
    if isinstance(value, str):
        return value.strip()
    return str(value)

def format_number(value: Numeric) -> str:
    """
    Render a validated value the way it appears in the question.

    Integral values print without a fractional part (``7``, not ``7.0``).
    Integers too large for a float keep their exact digits.
    """
    text = canonical_text(value)
    as_float = float(text)
    if math.isinf(as_float):
        return text
    if as_float.is_integer() and abs(as_float) < _PLAIN_INTEGER_LIMIT:
        return str(int(as_float))
    return repr(as_float)
