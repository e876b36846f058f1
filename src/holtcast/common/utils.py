"""
src/holtcast/common/utils.py

Small conversion helpers shared by config and validation.
"""

from __future__ import annotations

import math
import numbers
from typing import Any


def safe_int(value: Any, default: int) -> int:
    """Best-effort int conversion with fallback."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    """Best-effort float conversion with fallback."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def is_finite_number(value: Any) -> bool:
    """True for real numbers (bools excluded) that are not NaN or +/-inf."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(float(value))
