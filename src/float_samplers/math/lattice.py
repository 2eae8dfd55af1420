"""Define the lattice of evenly spaced representable values spanning a closed interval.

The spacing of the lattice is the ULP of the bound with the larger magnitude, so every lattice
point is exactly representable and no arithmetic on it ever rounds. Near the smaller-magnitude
bound the lattice is coarser than the native spacing of the precision, which slightly biases
sampling toward the bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from fractions import Fraction

from float_samplers.io.logging import log_debug
from float_samplers.math.float_bits import F64, FloatPrecision, ulp
from float_samplers.math.intervals import FloatBounds


@dataclass(frozen=True)
class ValueLattice:
    """An ordered, evenly spaced sequence of representable values covering [low, high]."""

    start: float
    """Bound with the larger magnitude, at index 0 (ties go to the lower bound)."""

    end: float
    """The other bound, at index `count - 1`."""

    step: float
    """Signed spacing between consecutive points, pointing from `start` toward `end`."""

    count: int
    """Number of distinct points in the lattice (at least 1)."""

    precision: FloatPrecision = field(default=F64)

    @classmethod
    def new_inclusive(
        cls,
        low: float,
        high: float,
        precision: FloatPrecision = F64,
    ) -> ValueLattice:
        """Construct the lattice covering the closed interval [low, high].

        :param low: Finite lower bound of the given precision
        :param high: Finite upper bound of the given precision, with high - low >= 0
        :param precision: Floating-point precision of the bounds (defaults to double precision)
        :return: Lattice whose first and last points are the two bounds
        """
        return cls.from_bounds(FloatBounds(low, high, precision))

    @classmethod
    def from_bounds(cls, bounds: FloatBounds) -> ValueLattice:
        """Construct the lattice covering the given validated closed bounds."""
        low, high, precision = bounds.low, bounds.high, bounds.precision

        min_abs = min(abs(low), abs(high))
        max_abs = max(abs(low), abs(high))
        gap = ulp(max_abs, precision)

        if abs(low) < abs(high):
            start, end, step = high, low, -gap
        else:
            start, end, step = low, high, gap

        if max_abs == 0.0:
            start, end = 0.0, 0.0  # Both signed zeros collapse onto the single point +0.0

        # Exact ratios: a float quotient may underflow to zero when the bounds are far apart
        max_gaps = Fraction(max_abs) / Fraction(gap)
        min_gaps = Fraction(min_abs) / Fraction(gap)
        assert max_gaps.denominator == 1, f"Non-integral gap count to {max_abs}: {max_gaps}"

        if (low < 0.0) == (high < 0.0):
            count = int(max_gaps) - math.floor(min_gaps) + 1
        else:
            # Rounding up on the near-zero side over-covers the smaller-magnitude bound
            count = int(max_gaps) + math.ceil(min_gaps) + 1

        assert count - 1 <= 2 * precision.max_precise_int, f"Lattice too large to index: {count}"

        log_debug(
            f"Built {precision.name} lattice over [{low!r}, {high!r}]: "
            f"start={start!r}, step={step!r}, count={count}",
        )
        return cls(start, end, step, count, precision)

    def get(self, index: int) -> float:
        """Retrieve the lattice point at the given index.

        The last index always yields `end` exactly. Other points are accumulated in halves so that
        each partial sum is itself a lattice point: no intermediate result rounds or overflows,
        even when `index` exceeds the range of integers the precision represents exactly.

        :param index: Index of the point, in [0, count)
        :return: Lattice point at the index
        :raises IndexError: If the index is outside of the lattice
        """
        if not 0 <= index < self.count:
            raise IndexError(f"Lattice index {index} out of bounds for count {self.count}.")

        if index == self.count - 1:
            return self.end

        half, parity = divmod(index, 2)
        half_offset = half * self.step
        return parity * self.step + self.start + half_offset + half_offset

    @property
    def bounds(self) -> FloatBounds:
        """Retrieve the closed bounds covered by the lattice, in non-decreasing order."""
        low, high = sorted((self.start, self.end))
        return FloatBounds(low, high, self.precision)
