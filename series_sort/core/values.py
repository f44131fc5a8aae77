#!filepath: series_sort/core/values.py
"""
Value kinds (FROZEN)

A sample value or a transform result is one of:
  INTEGER | FLOAT | TEXT | BOOLEAN

Invariants:
- bool is classified BOOLEAN, never INTEGER (bool subclasses int).
- numpy scalars classify like their Python counterparts.
- Float ordering is total: -0.0 < 0.0, NaN == NaN, NaN above every float.
- All compare_* helpers return -1 / 0 / 1.
"""
from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Tuple

import numpy as np


class ValueKind(Enum):
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    TEXT = "TEXT"
    BOOLEAN = "BOOLEAN"


# 可作为 sort key 的类型（BOOLEAN 不在其中）
KEY_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.TEXT})


def classify(value: Any) -> Optional[ValueKind]:
    if value is None:
        return None
    # bool 必须先判断
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, np.integer)):
        return ValueKind.INTEGER
    if isinstance(value, (float, np.floating)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    return None


# ----------------------------------------------------------------------
# three-way helpers
# ----------------------------------------------------------------------
def _sign(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def float_sort_key(x: float) -> Tuple[int, float, float]:
    x = float(x)
    if math.isnan(x):
        return (1, 0.0, 0.0)
    return (0, x, math.copysign(1.0, x))


def compare_floats(a: float, b: float) -> int:
    return _sign(float_sort_key(a), float_sort_key(b))


def compare_integers(a: int, b: int) -> int:
    return _sign(int(a), int(b))


def compare_numbers(a, b) -> int:
    """INTEGER vs FLOAT (either order): both coerced to float."""
    return compare_floats(float(a), float(b))


def compare_text(a: str, b: str) -> int:
    return _sign(a, b)


def compare_booleans(a: bool, b: bool) -> int:
    return _sign(bool(a), bool(b))


def render_float(x: float) -> str:
    """
    Double rendering of the original system:
      NaN / Infinity / -Infinity,
      positional for 1e-3 <= |x| < 1e7, otherwise d.dddE<exp>
    """
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "-0.0" if math.copysign(1.0, x) < 0 else "0.0"

    if 1e-3 <= abs(x) < 1e7:
        return repr(x)

    _, digits, exp = Decimal(repr(abs(x))).normalize().as_tuple()
    sci_exp = len(digits) - 1 + exp
    rest = "".join(str(d) for d in digits[1:]) or "0"
    sign = "-" if x < 0 else ""
    return f"{sign}{digits[0]}.{rest}E{sci_exp}"


def render_text(value: Any) -> str:
    """
    Text rendering used as the last-resort comparison between values
    of unrelated kinds.
    """
    kind = classify(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.FLOAT:
        return render_float(value)
    if kind is ValueKind.INTEGER:
        return str(int(value))
    return str(value)


def key_sort_function(kind: ValueKind):
    """
    Sort key for values already known to be of ``kind`` (a KEY_KINDS member).
    """
    if kind is ValueKind.FLOAT:
        return float_sort_key
    if kind is ValueKind.INTEGER:
        return int
    if kind is ValueKind.TEXT:
        return str
    raise ValueError(f"{kind} is not a sort key kind")
