"""Define a dataclass to represent validated bounds of a floating-point interval."""

from __future__ import annotations

from dataclasses import dataclass, field

from float_samplers.math.float_bits import F64, FloatPrecision, predecessor


@dataclass(frozen=True)
class FloatBounds:
    """A closed interval [low, high] whose endpoints are finite values of a fixed precision."""

    low: float
    """Lower bound of the interval (included in the interval)."""

    high: float
    """Upper bound of the interval (included in the interval)."""

    precision: FloatPrecision = field(default=F64)

    def __post_init__(self) -> None:
        """Verify that the bounds are representable at the precision and in non-decreasing order."""
        for name, bound in (("low", self.low), ("high", self.high)):
            if not self.precision.is_representable(bound):
                raise ValueError(
                    f"Invalid bounds: {name} ({bound}) is not a finite {self.precision.name} value",
                )

        if not self.high - self.low >= 0.0:
            raise ValueError(f"Invalid bounds: high ({self.high}) < low ({self.low}).")

        # Integer (or NumPy scalar) bounds are stored as Python floats
        object.__setattr__(self, "low", float(self.low))
        object.__setattr__(self, "high", float(self.high))

    @classmethod
    def half_open(cls, low: float, high: float, precision: FloatPrecision = F64) -> FloatBounds:
        """Construct the closed bounds covering exactly the representable values in [low, high).

        :param low: Lower bound (included)
        :param high: Upper bound (excluded), must be strictly greater than `low`
        :param precision: Floating-point precision of both bounds
        :return: Closed bounds [low, predecessor(high)]
        """
        if not low < high:
            raise ValueError(f"Invalid half-open bounds: high ({high}) must exceed low ({low}).")

        return cls(low, predecessor(high, precision), precision)

    @property
    def length(self) -> float:
        """Retrieve the length of the interval (may overflow to infinity for very wide bounds)."""
        return self.high - self.low

    def contains(self, x: float) -> bool:
        """Check whether the given value is inside the interval [low, high]."""
        return self.low <= x <= self.high
