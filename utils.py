from __future__ import annotations

import math
from typing import Optional


TWO_PI = 2 * math.pi
# Absolute tolerance for every equality and boundary decision.
EPS = 1e-9


def rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0

def deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / math.pi

def normalize_radians(value: float) -> float:
    """Reduce *value* into ``[0, 2π)`` using a floored modulo.

    Python's ``%`` already floors, but a tiny negative input rounds up to
    exactly ``2π``; that case folds back to ``0``.
    """
    result = value % TWO_PI
    if result >= TWO_PI:
        result -= TWO_PI
    return result

def close(a: float, b: float) -> bool:
    return abs(a - b) < EPS

def equal_mod_two_pi(a: float, b: float) -> bool:
    """Return ``True`` if *a* and *b* coincide modulo ``2π`` within ``EPS``."""
    turns = nearest_turn(a - b)
    if turns is None:
        return False
    return abs(a - (b + turns * TWO_PI)) < EPS

def nearest_turn(value: float) -> Optional[int]:
    """Number of whole turns closest to *value* radians, ``None`` if not finite."""
    if not math.isfinite(value):
        return None
    return round(value / TWO_PI)
