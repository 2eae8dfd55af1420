"""Define per-precision float value types and a uniform distribution that dispatches on them.

Bounds wrapped as `F32U` or `F64U` carry their precision in their type, so `Uniform.new()` can
select the matching lattice sampler without being told the precision separately.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

import numpy as np
from typing_extensions import Self

from float_samplers.math.float_bits import F32, F64, FloatPrecision
from float_samplers.math.sampling import UniformFloatSampler


@dataclass(frozen=True)
class PrecisionValue:
    """A finite float value tagged with the precision it belongs to."""

    value: float

    precision: ClassVar[FloatPrecision]

    def __post_init__(self) -> None:
        """Verify that the value is finite and exactly representable at the precision."""
        if not hasattr(type(self), "precision"):
            raise TypeError(f"{type(self).__name__} has no precision; use F32U or F64U instead.")
        if not self.precision.is_representable(self.value):
            raise ValueError(f"{self.value} is not a finite {self.precision.name} value.")

        # NumPy scalar values are stored as Python floats
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    @classmethod
    def from_native(cls, x: np.floating | float) -> Self:
        """Wrap a native (NumPy or Python) float without rounding it."""
        return cls(float(x))

    def to_native(self) -> np.floating:
        """Convert the value into a NumPy scalar of its precision."""
        return self.precision.to_native(self.value)


@dataclass(frozen=True)
class F32U(PrecisionValue):
    """A single-precision value usable as a bound of a uniform distribution."""

    precision: ClassVar[FloatPrecision] = F32


@dataclass(frozen=True)
class F64U(PrecisionValue):
    """A double-precision value usable as a bound of a uniform distribution."""

    precision: ClassVar[FloatPrecision] = F64


ValueT = TypeVar("ValueT", bound=PrecisionValue)


def _common_value_type(low: ValueT, high: ValueT) -> type[ValueT]:
    if type(low) is not type(high):
        raise TypeError(
            f"Bounds must share a value type, got {type(low).__name__} and {type(high).__name__}.",
        )
    return type(low)


@dataclass(frozen=True)
class Uniform(Generic[ValueT]):
    """Uniform distribution over an interval of values of one precision."""

    value_type: type[ValueT]
    sampler: UniformFloatSampler

    @classmethod
    def new(cls, low: ValueT, high: ValueT) -> Uniform[ValueT]:
        """Construct a uniform distribution over the half-open interval [low, high)."""
        value_type = _common_value_type(low, high)
        sampler = UniformFloatSampler.new(low.value, high.value, value_type.precision)
        return cls(value_type, sampler)

    @classmethod
    def new_inclusive(cls, low: ValueT, high: ValueT) -> Uniform[ValueT]:
        """Construct a uniform distribution over the closed interval [low, high]."""
        value_type = _common_value_type(low, high)
        sampler = UniformFloatSampler.new_inclusive(low.value, high.value, value_type.precision)
        return cls(value_type, sampler)

    def sample(self, rng: np.random.Generator | None = None) -> ValueT:
        """Sample one value, wrapped in the value type of the bounds."""
        return self.value_type(self.sampler.sample(rng))
