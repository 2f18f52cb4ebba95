"""Search engine: resumable frontier explorer, pacing policies, and drivers."""

from lattice_discovery.search.driver import (
    RoundLimitExceededError,
    SearchResult,
    SnapshotAccumulator,
    collect,
    run_search,
    run_search_from_config,
)
from lattice_discovery.search.explorer import ExplorerFinishedError, FrontierExplorer
from lattice_discovery.search.pacing import (
    DrainPacing,
    FixedPacing,
    FrontierPacing,
    PacingPolicy,
)

__all__ = [
    "DrainPacing",
    "ExplorerFinishedError",
    "FixedPacing",
    "FrontierExplorer",
    "FrontierPacing",
    "PacingPolicy",
    "RoundLimitExceededError",
    "SearchResult",
    "SnapshotAccumulator",
    "collect",
    "run_search",
    "run_search_from_config",
]
