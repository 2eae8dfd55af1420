"""Define Hypothesis strategies that generate floats uniformly from a value lattice."""

from __future__ import annotations

import hypothesis.strategies as st

from float_samplers.math.float_bits import F64, FloatPrecision
from float_samplers.math.intervals import FloatBounds
from float_samplers.math.lattice import ValueLattice


def uniform_floats(
    low: float,
    high: float,
    *,
    precision: FloatPrecision = F64,
    inclusive: bool = False,
) -> st.SearchStrategy[float]:
    """Create a strategy generating representable floats uniformly from an interval.

    Hypothesis draws the lattice index, so generated values shrink toward the larger-magnitude
    bound (index 0 of the lattice).

    :param low: Lower bound (always included)
    :param high: Upper bound (included only if `inclusive` is True)
    :param precision: Floating-point precision of the bounds and generated values
    :param inclusive: Whether the interval is closed [low, high] instead of half-open [low, high)
    :return: Strategy over the lattice points of the interval
    """
    if inclusive:
        bounds = FloatBounds(low, high, precision)
    else:
        bounds = FloatBounds.half_open(low, high, precision)

    lattice = ValueLattice.from_bounds(bounds)
    return st.integers(min_value=0, max_value=lattice.count - 1).map(lattice.get)
