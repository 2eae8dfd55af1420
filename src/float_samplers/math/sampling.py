"""Define samplers that draw floats uniformly from an interval without overflow or rounding.

The naive `low + (high - low) * u` can overflow to infinity for wide intervals, and its rounding
skews the distribution near the bounds. These samplers instead draw a uniform integer index into
a lattice of exactly representable values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

import numpy as np

from float_samplers.io.logging import log_debug
from float_samplers.math.float_bits import F64, FloatPrecision
from float_samplers.math.intervals import FloatBounds
from float_samplers.math.lattice import ValueLattice


class IntegerUniform(Protocol):
    """A distribution over the integers in a half-open range [0, n)."""

    def sample(self, rng: np.random.Generator) -> int:
        """Draw one integer uniformly from the range using the given random number generator."""
        ...


@dataclass(frozen=True)
class NumpyIntegerUniform:
    """Uniform distribution over [0, n) backed by NumPy's bounded integer generation."""

    n: int
    """Exclusive upper bound of the range (at least 1)."""

    def __post_init__(self) -> None:
        """Verify that the range is non-empty."""
        if self.n < 1:
            raise ValueError(f"Cannot sample integers from the empty range [0, {self.n}).")

    def sample(self, rng: np.random.Generator) -> int:
        """Draw one integer uniformly from [0, n)."""
        return int(rng.integers(0, self.n))


IntegerUniformFactory = Callable[[int], IntegerUniform]
"""Builds an integer-uniform distribution over [0, n) given n."""


@dataclass(frozen=True)
class UniformFloatSampler:
    """Samples floats uniformly from the points of a value lattice."""

    lattice: ValueLattice
    uniform: IntegerUniform
    """Distribution over the lattice indices [0, lattice.count)."""

    @classmethod
    def new(
        cls,
        low: float,
        high: float,
        precision: FloatPrecision = F64,
        uniform_factory: IntegerUniformFactory = NumpyIntegerUniform,
    ) -> UniformFloatSampler:
        """Construct a sampler over the half-open interval [low, high).

        :param low: Lower bound (included)
        :param high: Upper bound (excluded), strictly greater than `low`
        :param precision: Floating-point precision of the bounds and samples
        :param uniform_factory: Builds the integer distribution used to draw lattice indices
        :return: Sampler whose outputs are exactly the representable values in [low, high)
        """
        return cls.from_bounds(FloatBounds.half_open(low, high, precision), uniform_factory)

    @classmethod
    def new_inclusive(
        cls,
        low: float,
        high: float,
        precision: FloatPrecision = F64,
        uniform_factory: IntegerUniformFactory = NumpyIntegerUniform,
    ) -> UniformFloatSampler:
        """Construct a sampler over the closed interval [low, high].

        :param low: Lower bound (included)
        :param high: Upper bound (included), with high - low >= 0
        :param precision: Floating-point precision of the bounds and samples
        :param uniform_factory: Builds the integer distribution used to draw lattice indices
        :return: Sampler whose outputs lie in [low, high], including both bounds
        """
        return cls.from_bounds(FloatBounds(low, high, precision), uniform_factory)

    @classmethod
    def from_bounds(
        cls,
        bounds: FloatBounds,
        uniform_factory: IntegerUniformFactory = NumpyIntegerUniform,
    ) -> UniformFloatSampler:
        """Construct a sampler over the given validated closed bounds."""
        lattice = ValueLattice.from_bounds(bounds)
        log_debug(f"Sampling {lattice.count} lattice points within [{bounds.low}, {bounds.high}]")
        return cls(lattice, uniform_factory(lattice.count))

    @property
    def precision(self) -> FloatPrecision:
        """Retrieve the floating-point precision of the sampled values."""
        return self.lattice.precision

    def sample(self, rng: np.random.Generator | None = None) -> float:
        """Sample a value uniformly from the lattice of the sampler.

        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        :return: Float drawn uniformly from the sampled interval
        """
        rng = np.random.default_rng() if rng is None else rng
        return self.lattice.get(self.uniform.sample(rng))

    def sample_many(self, num_samples: int, rng: np.random.Generator | None = None) -> list[float]:
        """Draw the given number of independent samples (in order) from the same generator."""
        rng = np.random.default_rng() if rng is None else rng
        return [self.sample(rng) for _ in range(num_samples)]
