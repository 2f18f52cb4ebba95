"""Good/bad classification of lattice points by digit-sum cost."""

from __future__ import annotations

from collections.abc import Callable

from lattice_discovery.domain.digit_sum import digit_sum
from lattice_discovery.domain.snapshot import Point

DigitSumFn = Callable[[int], int]


def point_cost(point: Point, oracle: DigitSumFn = digit_sum) -> int:
    """Return ``digit_sum(x) + digit_sum(y)``."""
    x, y = point
    return oracle(x) + oracle(y)


def is_good(point: Point, target: int, oracle: DigitSumFn = digit_sum) -> bool:
    """Return True when the point's cost does not exceed *target*."""
    return point_cost(point, oracle) <= target
