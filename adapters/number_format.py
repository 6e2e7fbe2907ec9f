"""
number_format.py - numeric literals in, display strings out.

Literal grammar (one token, surrounding whitespace ignored):
    [+-] digits [. [digits]] [exponent]
    [+-] . digits [exponent]

Literals without a fractional part or exponent become int, the rest float.
Words such as "inf"/"nan" and digit groups with "_" are NOT literals, even
though Python's int()/float() would accept them.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional

from contracts import Number

_NUMBER_RE = re.compile(r"""
    ^[+-]?
    (?:
        (?P<int>   \d+ ) (?P<frac> \.\d* )?    # digits [ decimal-point more-digits ]
      | (?P<dot>   \.\d+ )                     # or decimal-point digits
    )
    (?P<exp> [eE][+-]?\d+ )?
    $
""", re.VERBOSE)


def parse_number(text: str) -> Optional[Number]:
    """
    Return the numeric value of a literal, or None if text is not one.
    Raises ValueError for an integer literal longer than the int/str
    conversion limit (sys.get_int_max_str_digits()).
    """
    s = text.strip()
    m = _NUMBER_RE.match(s)
    if m is None:
        return None
    if m.group("frac") is None and m.group("dot") is None and m.group("exp") is None:
        return int(s)
    return float(s)


def format_number(value: Number) -> str:
    """
    Integral floats drop their ".0" (8.0 -> "8"); everything else uses str().
    Raises ValueError for an int longer than the int/str conversion limit.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_stack(values: Iterable[Number]) -> str:
    """Bottom-to-top listing shared by show, clear and the final stack report."""
    return "[" + ", ".join(format_number(v) for v in values) + "]"
