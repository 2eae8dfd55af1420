"""Define floating-point precisions and bit-level utilities on their values.

Within a single sign, IEEE-754 bit patterns read as unsigned integers are ordered the same way
as the values they encode, so adding or subtracting one from a bit pattern moves to an adjacent
representable value. The utilities below rely on that property and never on rounding modes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class FloatPrecision:
    """A binary floating-point format paired with the unsigned integer type of equal width."""

    name: str
    float_type: type[np.floating]
    uint_type: type[np.unsignedinteger]

    @property
    def width(self) -> int:
        """Number of bits in the format."""
        return int(np.finfo(self.float_type).bits)

    @property
    def mantissa_digits(self) -> int:
        """Number of significant binary digits, including the implicit leading bit."""
        return int(np.finfo(self.float_type).nmant) + 1

    @property
    def max_precise_int(self) -> int:
        """Bound up to which every non-negative integer converts to this precision unrounded."""
        return 2**self.mantissa_digits

    @property
    def min_value(self) -> float:
        """Most negative finite value of the precision."""
        return float(np.finfo(self.float_type).min)

    @property
    def max_value(self) -> float:
        """Largest finite value of the precision."""
        return float(np.finfo(self.float_type).max)

    @property
    def epsilon(self) -> float:
        """Distance from 1.0 to the next larger representable value."""
        return float(np.finfo(self.float_type).eps)

    @property
    def smallest_subnormal(self) -> float:
        """Smallest positive representable value."""
        return self.from_bits(1)

    def to_native(self, x: float) -> np.floating:
        """Convert a Python float into a NumPy scalar of this precision (rounding to nearest)."""
        with np.errstate(over="ignore"):
            return self.float_type(x)

    def cast(self, x: float) -> float:
        """Round the given value to this precision, returned as a Python float."""
        return float(self.to_native(x))

    def is_representable(self, x: float) -> bool:
        """Check whether the given value is finite and exactly representable at this precision."""
        return math.isfinite(x) and self.cast(x) == x

    def to_bits(self, x: float) -> int:
        """Reinterpret the bits of the given value as an unsigned integer."""
        return int(np.array(self.to_native(x)).view(self.uint_type).item())

    def from_bits(self, bits: int) -> float:
        """Reinterpret the given unsigned integer bit pattern as a value of this precision."""
        return float(np.array(bits, dtype=self.uint_type).view(self.float_type).item())


F32 = FloatPrecision("f32", np.float32, np.uint32)
"""Single precision (IEEE-754 binary32)."""

F64 = FloatPrecision("f64", np.float64, np.uint64)
"""Double precision (IEEE-754 binary64)."""

PRECISIONS: dict[str, FloatPrecision] = {precision.name: precision for precision in (F32, F64)}


def precision_from_name(name: str) -> FloatPrecision:
    """Look up a supported precision by its name (e.g., "f32" or "f64").

    :raises ValueError: If no precision has the given name
    """
    if name not in PRECISIONS:
        raise ValueError(f"Unknown float precision '{name}', expected one of {sorted(PRECISIONS)}.")
    return PRECISIONS[name]


def _check_stepping_input(a: float, precision: FloatPrecision, caller: str) -> None:
    if not precision.is_representable(a):
        raise ValueError(f"`{caller}` requires a finite {precision.name} value, got {a}.")
    if a <= precision.min_value:
        raise ValueError(f"`{caller}` has no value below the minimum {precision.name} value {a}.")


def predecessor(a: float, precision: FloatPrecision = F64) -> float:
    """Find the greatest representable value strictly less than the given value.

    Both signed zeros are treated as zero, so their predecessor is the negated smallest subnormal.

    :param a: Finite value of the given precision, greater than its most negative value
    :param precision: Floating-point precision of the value (defaults to double precision)
    :return: Adjacent representable value below `a`
    """
    _check_stepping_input(a, precision, "predecessor")

    if a == 0.0:
        return -precision.from_bits(1)

    bits = precision.to_bits(a)
    if a < 0.0:
        return precision.from_bits(bits + 1)  # Away from zero
    return precision.from_bits(bits - 1)  # Toward zero


def ulp(a: float, precision: FloatPrecision = F64) -> float:
    """Compute the unit in the last place at the magnitude of the given value.

    This is the gap between |a| and the representable value just below it (so `ulp(1.0)` is half
    the precision's epsilon), which halves across each power of two going toward zero.

    :param a: Finite value of the given precision, greater than its most negative value
    :param precision: Floating-point precision of the value (defaults to double precision)
    :return: Positive spacing between adjacent representable values near |a|
    """
    _check_stepping_input(a, precision, "ulp")
    magnitude = abs(a)
    return magnitude - predecessor(magnitude, precision)
