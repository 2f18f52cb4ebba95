"""Tests for lattice_discovery.domain.classify."""

from __future__ import annotations

from lattice_discovery.domain.classify import is_good, point_cost
from lattice_discovery.domain.digit_sum import DigitSumOracle


def test_point_cost_sums_both_coordinates() -> None:
    assert point_cost((19, -28)) == 10 + 10
    assert point_cost((0, 0)) == 0


def test_is_good_is_inclusive_at_threshold() -> None:
    assert is_good((5, 3), 8)
    assert not is_good((5, 4), 8)


def test_origin_is_always_good() -> None:
    assert is_good((0, 0), 0)


def test_nonzero_points_are_bad_for_zero_target() -> None:
    for point in [(1, 0), (0, -1), (10, 0), (-100, 100)]:
        assert not is_good(point, 0)


def test_invariant_under_reflection_and_swap() -> None:
    x, y = 37, 12
    images = [(x, y), (-x, y), (x, -y), (-x, -y), (y, x), (-y, x), (y, -x), (-y, -x)]
    assert len({point_cost(p) for p in images}) == 1


def test_custom_oracle_is_used() -> None:
    oracle = DigitSumOracle()
    assert is_good((123, 45), 15, oracle=oracle)
    assert oracle.cache_size > 0
