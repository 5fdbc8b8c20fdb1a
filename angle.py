"""Oriented angle value type.

An :class:`Angle` stores a single raw radian value exactly as it was built or
produced by arithmetic.  The raw value may be negative or exceed a full turn,
which is how sums of rotations keep their multi-turn magnitude.  The
normalized representative in ``[0, 2π)`` is derived on every read and is what
equality, ordering and hashing look at.
"""

from __future__ import annotations

from numbers import Real

import numpy as np

from utils import EPS, deg, normalize_radians, rad


class Angle:
    """Represents an angle in radians with helpers for degree conversion."""

    def __init__(self, value: float = 0.0, is_radians: bool = True, normalize: bool = True) -> None:
        radians = float(value) if is_radians else rad(float(value))
        self._radians = normalize_radians(radians) if normalize else radians

    @staticmethod
    def from_degrees(degrees: float, normalize: bool = True) -> "Angle":
        return Angle(degrees, is_radians=False, normalize=normalize)

    # ------------------------------------------------------------------
    # Raw / normalized views
    # ------------------------------------------------------------------
    @property
    def raw_radians(self) -> float:
        return self._radians

    @property
    def normalized_radians(self) -> float:
        return normalize_radians(self._radians)

    @property
    def radians(self) -> float:
        return self._radians

    @radians.setter
    def radians(self, value: float) -> None:
        self._radians = float(value)

    @property
    def degrees(self) -> float:
        """Return the raw angle in degrees."""
        return deg(self._radians)

    @degrees.setter
    def degrees(self, value: float) -> None:
        self._radians = rad(float(value))

    # ------------------------------------------------------------------
    # Arithmetic (raw values, results are never normalized)
    # ------------------------------------------------------------------
    @staticmethod
    def _operand(other) -> float | None:
        if isinstance(other, Angle):
            return other._radians
        if isinstance(other, Real):
            return float(other)
        return None

    def add(self, other: "Angle | float") -> "Angle":
        value = self._operand(other)
        if value is None:
            raise TypeError(f"cannot add {type(other).__name__} to Angle")
        return Angle(self._radians + value, normalize=False)

    def subtract(self, other: "Angle | float") -> "Angle":
        value = self._operand(other)
        if value is None:
            raise TypeError(f"cannot subtract {type(other).__name__} from Angle")
        return Angle(self._radians - value, normalize=False)

    def scale(self, factor: float) -> "Angle":
        return Angle(self._radians * float(factor), normalize=False)

    def divide(self, divisor: float) -> "Angle":
        """Divide the raw value; a zero divisor gives ``inf`` or ``nan``."""
        with np.errstate(divide="ignore", invalid="ignore"):
            value = np.float64(self._radians) / np.float64(divisor)
        return Angle(float(value), normalize=False)

    def __add__(self, other) -> "Angle":
        if self._operand(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other) -> "Angle":
        if self._operand(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other) -> "Angle":
        if not isinstance(other, Real):
            return NotImplemented
        return Angle(float(other) - self._radians, normalize=False)

    def __mul__(self, factor) -> "Angle":
        if not isinstance(factor, Real):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor) -> "Angle":
        if not isinstance(divisor, Real):
            return NotImplemented
        return self.divide(divisor)

    def __neg__(self) -> "Angle":
        return Angle(-self._radians, normalize=False)

    # ------------------------------------------------------------------
    # Conversions (raw values)
    # ------------------------------------------------------------------
    def __float__(self) -> float:
        return self._radians

    def to_float32(self) -> np.float32:
        return np.float32(self._radians)

    def to_int(self) -> int:
        """Rounded raw value.

        Python ints have no NaN or infinity, so those raise ``ValueError`` and
        ``OverflowError``; use ``float(angle)`` to keep IEEE special values.
        """
        # round() uses banker's rounding: 2.5 -> 2
        return int(round(self._radians))

    __int__ = to_int

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def format_as(self, mode: str = "deg") -> str:
        """Render as ``"rad"``/``"radians"`` or ``"deg"``/``"degrees"``.

        Unknown modes fall back to degrees.
        """
        mode = (mode or "").lower()
        if mode in ("rad", "radians"):
            return f"{self._radians:.2f} rad"
        return f"{self.degrees:.1f}°"

    def __format__(self, format_spec: str) -> str:
        return self.format_as(format_spec)

    def __str__(self) -> str:
        return self.format_as("deg")

    def __repr__(self) -> str:
        return (
            f"Angle(raw_radians={self._radians:.4f}, "
            f"normalized={self.normalized_radians:.4f}, degrees={self.degrees:.2f}°)"
        )

    # ------------------------------------------------------------------
    # Comparison and hashing support
    # ------------------------------------------------------------------
    def equals_within_epsilon(self, other: "Angle") -> bool:
        return abs(self.normalized_radians - other.normalized_radians) < EPS

    def compare_normalized(self, other: "Angle") -> int:
        """Three-way comparison of normalized values; ``0`` within ``EPS``."""
        if self.equals_within_epsilon(other):
            return 0
        if self.normalized_radians < other.normalized_radians:
            return -1
        if self.normalized_radians > other.normalized_radians:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented  # type: ignore[return-value]
        return self.equals_within_epsilon(other)

    def __lt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented  # type: ignore[return-value]
        return self.normalized_radians < other.normalized_radians

    def __le__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented  # type: ignore[return-value]
        return self.normalized_radians <= other.normalized_radians

    def __gt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented  # type: ignore[return-value]
        return self.normalized_radians > other.normalized_radians

    def __ge__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented  # type: ignore[return-value]
        return self.normalized_radians >= other.normalized_radians

    def __hash__(self) -> int:
        return hash(self.normalized_radians)
