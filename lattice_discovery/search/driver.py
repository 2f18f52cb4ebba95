"""Consumer-side helpers that pull snapshots from a frontier explorer.

The explorer never bounds its own work; these helpers do, and they fold the
per-round snapshots into running totals the way a progressive display would.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from lattice_discovery.config.types import ExplorerConfig
from lattice_discovery.domain.snapshot import Point, Snapshot
from lattice_discovery.search.explorer import FrontierExplorer
from lattice_discovery.search.pacing import PacingPolicy

logger = logging.getLogger(__name__)


class RoundLimitExceededError(RuntimeError):
    """Raised when a run does not finish within the configured round cap."""


@dataclass(frozen=True)
class SearchResult:
    """Full-plane outcome of a finished search."""

    target: int
    rounds: int
    good: tuple[Point, ...]
    bad: tuple[Point, ...]
    max_coord: int

    def summary(self) -> dict[str, int]:
        return {
            "target": self.target,
            "rounds": self.rounds,
            "good": len(self.good),
            "bad": len(self.bad),
            "max": self.max_coord,
        }


class SnapshotAccumulator:
    """Running tally of a snapshot stream.

    Good and bad points always accumulate, and the counts cover every point
    seen so far. ``keep_bad`` only affects :attr:`shown_bad`, the rejections a
    progressive display draws: without it, mid-run frames show just the
    latest round's rejections, while the terminal frame shows all of them.
    ``waiting`` always reflects the latest snapshot.
    """

    def __init__(self, keep_bad: bool = False) -> None:
        self.keep_bad = keep_bad
        self._good: dict[Point, None] = {}
        self._bad: dict[Point, None] = {}
        self._latest_bad: tuple[Point, ...] = ()
        self.waiting: tuple[Point, ...] = ()
        self.max_coord = 0
        self.rounds = 0
        self.finished = False

    def add(self, snapshot: Snapshot) -> None:
        if self.finished:
            raise ValueError("snapshot received after the terminal snapshot")
        self._good.update(dict.fromkeys(snapshot.good))
        self._bad.update(dict.fromkeys(snapshot.bad))
        self._latest_bad = snapshot.bad
        self.waiting = snapshot.waiting
        self.max_coord = max(self.max_coord, snapshot.max_coord)
        self.rounds += 1
        self.finished = snapshot.final

    @property
    def good(self) -> tuple[Point, ...]:
        return tuple(self._good)

    @property
    def bad(self) -> tuple[Point, ...]:
        return tuple(self._bad)

    @property
    def shown_bad(self) -> tuple[Point, ...]:
        """Rejected points to draw for the current frame."""
        if self.keep_bad or self.finished:
            return self.bad
        return self._latest_bad

    def counts_message(self) -> str:
        return (
            f"valid: {len(self._good)}, invalid: {len(self._bad)}, "
            f"waiting check: {len(self.waiting)}"
        )


def collect(
    snapshots: Iterable[Snapshot], target: int, max_rounds: int | None = None
) -> SearchResult:
    """Fold a snapshot stream into a :class:`SearchResult`.

    Raises :class:`RoundLimitExceededError` if ``max_rounds`` snapshots were
    consumed without reaching the terminal one.
    """
    accumulator = SnapshotAccumulator()
    for snapshot in snapshots:
        accumulator.add(snapshot)
        if accumulator.finished:
            break
        if max_rounds is not None and accumulator.rounds >= max_rounds:
            raise RoundLimitExceededError(
                f"search for target={target} did not finish within {max_rounds} rounds"
            )
    if not accumulator.finished:
        raise ValueError("snapshot stream ended without a terminal snapshot")
    return SearchResult(
        target=target,
        rounds=accumulator.rounds,
        good=accumulator.good,
        bad=accumulator.bad,
        max_coord=accumulator.max_coord,
    )


def run_search(
    target: int,
    initial_max: int = 0,
    max_rounds: int | None = None,
    pacing: PacingPolicy | None = None,
) -> SearchResult:
    """Run a search to completion and return the accumulated result."""
    if max_rounds is not None and max_rounds < 1:
        raise ValueError("max_rounds must be >= 1")
    explorer = FrontierExplorer(target=target, initial_max=initial_max, pacing=pacing)
    result = collect(explorer, target=explorer.target, max_rounds=max_rounds)
    logger.info("target=%d: %d good, %d bad points", target, len(result.good), len(result.bad))
    return result


def run_search_from_config(config: ExplorerConfig) -> SearchResult:
    """Config-driven variant of :func:`run_search`."""
    return run_search(
        target=config.target,
        initial_max=config.initial_max,
        max_rounds=config.max_rounds,
        pacing=PacingPolicy.from_name(config.pacing, batch_size=config.batch_size),
    )
