"""Incremental discovery of digit-sum bounded regions of the integer lattice."""

from lattice_discovery.domain import (
    DigitSumOracle,
    ExplorerState,
    Point,
    Snapshot,
    digit_sum,
    expand_octant,
    is_good,
    reflect_point,
)
from lattice_discovery.search import (
    ExplorerFinishedError,
    FrontierExplorer,
    PacingPolicy,
    RoundLimitExceededError,
    SearchResult,
    SnapshotAccumulator,
    run_search,
)

__all__ = [
    "DigitSumOracle",
    "ExplorerFinishedError",
    "ExplorerState",
    "FrontierExplorer",
    "PacingPolicy",
    "Point",
    "RoundLimitExceededError",
    "SearchResult",
    "Snapshot",
    "SnapshotAccumulator",
    "digit_sum",
    "expand_octant",
    "is_good",
    "reflect_point",
    "run_search",
]
