"""Unit tests for the lattice of representable values defined in lattice.py."""

from __future__ import annotations

import math

import hypothesis.strategies as st
import pytest
from hypothesis import assume, given

from float_samplers.math.float_bits import F32, F64, FloatPrecision, ulp
from float_samplers.math.lattice import ValueLattice

from .common_strategies import float_ranges, precision_floats


def test_zero_lattice_has_one_positive_point() -> None:
    """Verify that [-0.0, 0.0] is treated as [0.0, 0.0], since the distance between them is 0."""
    # Arrange/Act - Given the interval between both signed zeros, construct its lattice
    lattice = ValueLattice.new_inclusive(-0.0, 0.0)

    # Assert - Expect a single point, which is positive zero
    assert lattice.count == 1
    assert lattice.get(0) == 0.0
    assert math.copysign(1.0, lattice.get(0)) == 1.0


@pytest.mark.parametrize(("low", "high"), [(0.0, -0.0), (-0.0, -0.0)])
def test_any_zero_interval_collapses_to_positive_zero(low: float, high: float) -> None:
    """Verify that every interval between signed zeros yields the single point +0.0."""
    lattice = ValueLattice.new_inclusive(low, high)

    assert lattice.count == 1
    assert math.copysign(1.0, lattice.get(0)) == 1.0


@given(precision_floats())
def test_single_value_interval(precision_and_value: tuple[FloatPrecision, float]) -> None:
    """Verify that an interval with equal bounds has a single point equal to the bound."""
    precision, value = precision_and_value
    lattice = ValueLattice.new_inclusive(value, value, precision)

    assert (lattice.count, lattice.get(0)) == (1, value)


@given(float_ranges())
def test_low_and_high_are_start_and_end(bounds: tuple[FloatPrecision, float, float]) -> None:
    """Verify that the first and last lattice points are exactly the bounds of the interval."""
    # Arrange/Act - Given valid bounds, construct the lattice and find its first and last points
    precision, low, high = bounds
    lattice = ValueLattice.new_inclusive(low, high, precision)
    first, last = lattice.get(0), lattice.get(lattice.count - 1)

    # Assert - Expect that the sorted endpoints reproduce the bounds
    assert lattice.count >= 1
    assert (min(first, last), max(first, last)) == (low, high)


@given(float_ranges(), st.data())
def test_values_excluding_end_are_equally_spaced(
    bounds: tuple[FloatPrecision, float, float],
    data: st.DataObject,
) -> None:
    """Verify that all consecutive lattice points (except the last pair) differ by the step."""
    # Arrange - Given a lattice with more than one point, and indices before its final gap
    precision, low, high = bounds
    lattice = ValueLattice.new_inclusive(low, high, precision)
    assume(lattice.count > 2)
    index_strategy = st.integers(min_value=0, max_value=lattice.count - 3)
    indices = data.draw(st.lists(index_strategy, min_size=1, max_size=32))

    # Act/Assert - Expect that each of the gaps exactly equals the step
    for i in indices:
        assert lattice.get(i + 1) - lattice.get(i) == lattice.step


@given(float_ranges())
def test_end_gap_smaller_but_positive(bounds: tuple[FloatPrecision, float, float]) -> None:
    """Verify that the final gap of the lattice is positive and no larger than the step."""
    # Arrange - Given a lattice with more than one point
    precision, low, high = bounds
    lattice = ValueLattice.new_inclusive(low, high, precision)
    n = lattice.count
    assume(n > 1)

    # Act/Assert - Expect that the final gap is in (0, |step|]
    gap = abs(lattice.get(n - 1) - lattice.get(n - 2))
    assert 0.0 < gap <= abs(lattice.step)


@given(float_ranges())
def test_step_is_ulp_of_larger_magnitude_bound(bounds: tuple[FloatPrecision, float, float]) -> None:
    """Verify that the lattice is anchored on the bound with the larger magnitude."""
    precision, low, high = bounds
    lattice = ValueLattice.new_inclusive(low, high, precision)

    assert abs(lattice.start) == max(abs(low), abs(high))
    assert abs(lattice.step) == ulp(max(abs(low), abs(high)), precision)


def test_symmetric_interval_anchors_on_low() -> None:
    """Verify that bounds of equal magnitude anchor the lattice on the lower bound."""
    lattice = ValueLattice.new_inclusive(-2.0, 2.0)

    assert (lattice.start, lattice.end) == (-2.0, 2.0)
    assert lattice.step == ulp(2.0)


def test_larger_high_anchors_on_high() -> None:
    """Verify that a larger-magnitude upper bound anchors the lattice, stepping downward."""
    lattice = ValueLattice.new_inclusive(1.0, 4.0)

    assert (lattice.start, lattice.end) == (4.0, 1.0)
    assert lattice.step == -ulp(4.0)


@pytest.mark.parametrize("precision", [F32, F64])
def test_unit_interval_count(precision: FloatPrecision) -> None:
    """Verify that the lattice over [1, 2] holds exactly the representable values in [1, 2]."""
    lattice = ValueLattice.new_inclusive(1.0, 2.0, precision)

    assert lattice.count == 2 ** (precision.mantissa_digits - 1) + 1
    assert lattice.get(1) == 2.0 - precision.epsilon


@pytest.mark.parametrize("precision", [F32, F64])
def test_full_range_lattice_does_not_overflow(precision: FloatPrecision) -> None:
    """Verify that indexing a lattice spanning every finite value never overflows to infinity."""
    # Arrange - Given the lattice over the full finite range of the precision
    lattice = ValueLattice.new_inclusive(precision.min_value, precision.max_value, precision)

    # Act - Look up the middle point and the points next to it
    middle = lattice.count // 2

    # Assert - Expect the midpoint of the symmetric range to be zero, with neighbors a step away
    assert lattice.get(middle) == 0.0
    assert lattice.get(middle + 1) == lattice.step
    assert lattice.get(middle - 1) == -lattice.step
    assert lattice.get(lattice.count - 2) == precision.max_value - lattice.step


@pytest.mark.parametrize("index", [-1, 3])
def test_get_out_of_bounds_raises_error(index: int) -> None:
    """Verify that indices outside of [0, count) raise an IndexError."""
    lattice = ValueLattice.new_inclusive(1.0, 1.0 + 2 * F64.epsilon)
    assert lattice.count == 3

    with pytest.raises(IndexError, match="out of bounds"):
        _ = lattice.get(index)


@pytest.mark.parametrize(
    ("low", "high"),
    [(2.0, 1.0), (-math.inf, 0.0), (0.0, math.inf), (math.nan, 1.0), (0.0, math.nan)],
)
def test_invalid_bounds_raise_error(low: float, high: float) -> None:
    """Verify that non-finite or decreasing bounds raise a ValueError."""
    with pytest.raises(ValueError, match="Invalid bounds"):
        _ = ValueLattice.new_inclusive(low, high)


def test_bounds_not_representable_in_precision_raise_error() -> None:
    """Verify that a bound which would round at single precision raises a ValueError."""
    with pytest.raises(ValueError, match="f32"):
        _ = ValueLattice.new_inclusive(0.0, 0.1, F32)


def test_bounds_are_sorted() -> None:
    """Verify that a lattice anchored on its upper bound reports its bounds in increasing order."""
    bounds = ValueLattice.new_inclusive(-1.0, 10.0).bounds

    assert (bounds.low, bounds.high) == (-1.0, 10.0)
    assert bounds.contains(0.0)
    assert not bounds.contains(10.5)
