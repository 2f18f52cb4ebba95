"""Domain layer: digit sums, classification, symmetry, and typed snapshots."""

from lattice_discovery.domain.classify import is_good, point_cost
from lattice_discovery.domain.digit_sum import DigitSumOracle, digit_sum, shared_oracle
from lattice_discovery.domain.snapshot import ExplorerState, Point, Snapshot
from lattice_discovery.domain.symmetry import expand_octant, in_canonical_octant, reflect_point

__all__ = [
    "DigitSumOracle",
    "ExplorerState",
    "Point",
    "Snapshot",
    "digit_sum",
    "expand_octant",
    "in_canonical_octant",
    "is_good",
    "point_cost",
    "reflect_point",
    "shared_oracle",
]
