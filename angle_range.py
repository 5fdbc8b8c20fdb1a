"""Directed circular arcs with open or closed endpoints.

An :class:`AngleRange` sweeps in the positive direction from ``start`` to
``end``.  The arc lives on the raw radian line as
``[start.raw_radians, start.raw_radians + length]`` and its length is never
reduced below the raw sweep, so arcs covering several revolutions keep their
size.  Membership is still periodic: containment and union search over whole
turn shifts to line a point or another arc up with this one.
"""

from __future__ import annotations

from dataclasses import KW_ONLY, InitVar, dataclass
import logging
import math
from typing import List, Optional

from angle import Angle
from utils import EPS, TWO_PI, close, equal_mod_two_pi, nearest_turn

logger = logging.getLogger(__name__)

MAX_LOOP_TURNS = 4096


def _as_angle(value: "Angle | float", is_radians: bool) -> Angle:
    # Arcs own their endpoints, so angles are copied rather than shared.
    if isinstance(value, Angle):
        return Angle(value.raw_radians, normalize=False)
    return Angle(value, is_radians=is_radians, normalize=False)


def _merged_flag(bound: float, first: float, second: float,
                 first_flag: bool, second_flag: bool) -> bool:
    if close(bound, first) and close(bound, second):
        return first_flag or second_flag
    if close(bound, first):
        return first_flag
    return second_flag


def _compact(value: float, digits: int) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True, repr=False)
class AngleRange:
    """Arc from ``start`` to ``end`` swept counter-clockwise."""

    start: Angle
    end: Angle
    _: KW_ONLY
    include_start: bool = True
    include_end: bool = True
    is_radians: InitVar[bool] = True

    def __post_init__(self, is_radians: bool) -> None:
        object.__setattr__(self, "start", _as_angle(self.start, is_radians))
        object.__setattr__(self, "end", _as_angle(self.end, is_radians))

    @classmethod
    def from_values(cls, start: float, end: float, is_radians: bool = True,
                    include_start: bool = True, include_end: bool = True) -> "AngleRange":
        """Build a range from plain numbers, keeping their raw magnitude."""
        return cls(start, end, include_start=include_start, include_end=include_end,
                   is_radians=is_radians)

    # ------------------------------------------------------------------
    # Extent
    # ------------------------------------------------------------------
    def get_length(self) -> float:
        """Positive sweep from ``start`` to ``end``; may exceed ``2π``."""
        delta = self.end.raw_radians - self.start.raw_radians
        if math.isnan(delta) or delta == math.inf:
            return delta
        if delta == -math.inf:
            return math.nan
        # whole-turn jump only where the plain loop would run for too long
        if delta < -MAX_LOOP_TURNS * TWO_PI:
            delta += math.floor(-delta / TWO_PI) * TWO_PI
        while delta < 0:
            delta += TWO_PI
        return delta

    @property
    def length(self) -> float:
        return self.get_length()

    @property
    def effective_end(self) -> float:
        """Right end of the arc on the raw line (``>= start.raw_radians``)."""
        return self.start.raw_radians + self.get_length()

    def is_degenerate(self) -> bool:
        return close(self.get_length(), 0.0)

    # ------------------------------------------------------------------
    # Containment
    # ------------------------------------------------------------------
    def contains(self, item: "Angle | AngleRange | None") -> bool:
        """Test membership of an :class:`Angle` or a whole :class:`AngleRange`.

        ``None`` is never contained.  Zero-length ranges contain nothing.
        """
        if item is None:
            return False
        if isinstance(item, AngleRange):
            return self._contains_range(item)
        if isinstance(item, Angle):
            return self._contains_angle(item)
        raise TypeError(f"AngleRange cannot contain {type(item).__name__}")

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def _contains_angle(self, angle: Angle) -> bool:
        s = self.start.raw_radians
        length = self.get_length()
        x = angle.raw_radians
        if not (math.isfinite(s) and math.isfinite(length) and math.isfinite(x)):
            return False
        if close(length, 0.0):
            return False
        e = s + length

        # whole turns m with x + m*2π inside [s, e]
        m_min = math.ceil((s - x - EPS) / TWO_PI)
        m_max = math.floor((e - x + EPS) / TWO_PI)
        if m_min > m_max:
            return False

        shifted = x + m_min * TWO_PI
        if close(shifted, s):
            return self.include_start
        if close(shifted, e):
            return self.include_end
        if s + EPS < shifted < e - EPS:
            return True
        return m_max > m_min

    def _contains_range(self, other: "AngleRange") -> bool:
        s = self.start.raw_radians
        length = self.get_length()
        os_ = other.start.raw_radians
        other_length = other.get_length()
        if not all(math.isfinite(v) for v in (s, length, os_, other_length)):
            return False
        if close(length, 0.0):
            return False
        e = s + length
        oe = os_ + other_length

        # turns m with s <= os + m*2π and oe + m*2π <= e
        m_min = math.ceil((s - os_ - EPS) / TWO_PI)
        m_max = math.floor((e - oe + EPS) / TWO_PI)
        if m_min > m_max:
            return False

        # decided at m_min, like the point test
        shifted_start = os_ + m_min * TWO_PI
        shifted_end = oe + m_min * TWO_PI
        if close(shifted_start, s) and other.include_start and not self.include_start:
            return False
        if close(shifted_end, e) and other.include_end and not self.include_end:
            return False
        return True

    def touches(self, other: Optional["AngleRange"]) -> bool:
        """``True`` if one range ends where the other starts, modulo ``2π``."""
        if other is None:
            return False
        if equal_mod_two_pi(self.end.raw_radians, other.start.raw_radians):
            return True
        return equal_mod_two_pi(self.start.raw_radians, other.end.raw_radians)

    # ------------------------------------------------------------------
    # Union
    # ------------------------------------------------------------------
    @staticmethod
    def union(a: Optional["AngleRange"], b: Optional["AngleRange"]) -> List["AngleRange"]:
        """Merge two ranges.

        Returns one range when they overlap or touch, otherwise both ranges
        ordered by start position once ``b`` is aligned to the nearest turn of
        ``a``.  Returns an empty list if either operand is ``None``.
        """
        if a is None or b is None:
            return []
        if a.contains(b):
            return [a]
        if b.contains(a):
            return [b]

        s1 = a.start.raw_radians
        e1 = s1 + a.get_length()
        s2 = b.start.raw_radians
        e2 = s2 + b.get_length()

        m_center = nearest_turn(s1 - s2)
        if m_center is None:
            logger.debug("union of non-finite ranges %r and %r", a, b)
            return [a, b]

        for m in (m_center - 1, m_center, m_center + 1):
            s2m = s2 + m * TWO_PI
            e2m = e2 + m * TWO_PI
            if e1 < s2m - EPS or e2m < s1 - EPS:
                continue
            new_start = min(s1, s2m)
            new_end = max(e1, e2m)
            merged = AngleRange(
                Angle(new_start, normalize=False),
                Angle(new_end, normalize=False),
                include_start=_merged_flag(new_start, s1, s2m, a.include_start, b.include_start),
                include_end=_merged_flag(new_end, e1, e2m, a.include_end, b.include_end),
            )
            logger.debug("merged %s and %s at shift %d into %s", a, b, m, merged)
            return [merged]

        logger.debug("ranges %s and %s are disjoint", a, b)
        if s1 <= s2 + m_center * TWO_PI:
            return [a, b]
        return [b, a]

    def union_with(self, other: Optional["AngleRange"]) -> List["AngleRange"]:
        return AngleRange.union(self, other)

    # ------------------------------------------------------------------
    # Representation helpers
    # ------------------------------------------------------------------
    def _brackets(self) -> tuple[str, str]:
        return ("[" if self.include_start else "(", "]" if self.include_end else ")")

    def format_as(self, mode: str = "deg") -> str:
        """Compact rendering: degrees, or raw radians followed by the length."""
        left, right = self._brackets()
        if (mode or "").lower() in ("rad", "radians"):
            return (
                f"{left}{_compact(self.start.raw_radians, 3)} rad .. "
                f"{_compact(self.end.raw_radians, 3)} rad{right}  "
                f"({_compact(self.get_length(), 3)} rad)"
            )
        return f"{left}{_compact(self.start.degrees, 2)}° .. {_compact(self.end.degrees, 2)}°{right}"

    def __str__(self) -> str:
        left, right = self._brackets()
        return (
            f"{left}{self.start:rad} ({self.start:deg}), "
            f"{self.end:rad} ({self.end:deg}){right}"
        )

    def __repr__(self) -> str:
        return (
            f"AngleRange(start={self.start!r}, end={self.end!r}, "
            f"include_start={self.include_start}, include_end={self.include_end}, "
            f"length={self.get_length():.4f})"
        )
