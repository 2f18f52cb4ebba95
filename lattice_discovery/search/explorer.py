"""Resumable breadth-first frontier search over the canonical octant.

The explorer is an explicit state object: queue, visited set, running
maximum coordinate and batch limit persist between rounds, and each call to
:meth:`FrontierExplorer.step` performs exactly one bounded round and returns
one :class:`Snapshot`. No work happens outside ``step``.

Only points with ``x >= y >= 0`` are ever queued; the rest of the plane is
reconstructed by reflecting each round's output. Bad points are never
expanded, so the good region is reached through good points only and is
delimited by a one-point-thick halo of bad points.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from lattice_discovery.config.constants import INITIAL_BATCH_LIMIT, NEIGHBOR_OFFSETS, ORIGIN
from lattice_discovery.config.types import ExplorerConfig, require_non_negative_int
from lattice_discovery.domain.classify import DigitSumFn, is_good
from lattice_discovery.domain.digit_sum import digit_sum
from lattice_discovery.domain.snapshot import ExplorerState, Point, Snapshot
from lattice_discovery.domain.symmetry import expand_octant, in_canonical_octant
from lattice_discovery.search.pacing import FrontierPacing, PacingPolicy

logger = logging.getLogger(__name__)


class ExplorerFinishedError(RuntimeError):
    """Raised when a finished explorer is resumed."""


class FrontierExplorer:
    """Pull-driven digit-sum boundary search; one ``step()`` per snapshot."""

    def __init__(
        self,
        target: int,
        initial_max: int = 0,
        pacing: PacingPolicy | None = None,
        oracle: DigitSumFn | None = None,
    ) -> None:
        self._target = require_non_negative_int(target, "target")
        self._max_coord = require_non_negative_int(initial_max, "initial_max")
        self._pacing = pacing or FrontierPacing()
        self._oracle = oracle or digit_sum
        self._queue: deque[Point] = deque([ORIGIN])
        self._visited: set[Point] = {ORIGIN}
        self._batch_limit: int | None = INITIAL_BATCH_LIMIT
        self._rounds = 0
        self._state = ExplorerState.YIELDING

    @classmethod
    def from_config(cls, config: ExplorerConfig) -> FrontierExplorer:
        pacing = PacingPolicy.from_name(config.pacing, batch_size=config.batch_size)
        return cls(target=config.target, initial_max=config.initial_max, pacing=pacing)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def target(self) -> int:
        return self._target

    @property
    def state(self) -> ExplorerState:
        return self._state

    @property
    def done(self) -> bool:
        return self._state is ExplorerState.DONE

    @property
    def rounds(self) -> int:
        """Number of completed rounds."""
        return self._rounds

    @property
    def batch_limit(self) -> int | None:
        """Points the next round may process; ``None`` when unbounded."""
        return self._batch_limit

    @property
    def max_coord(self) -> int:
        return self._max_coord

    @property
    def pacing(self) -> PacingPolicy:
        return self._pacing

    @property
    def frontier(self) -> tuple[Point, ...]:
        """Copy of the queued canonical-octant points, oldest first."""
        return tuple(self._queue)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _enqueue_neighbors(self, point: Point) -> None:
        x, y = point
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = (x + dx, y + dy)
            if neighbor in self._visited or not in_canonical_octant(neighbor):
                continue
            self._queue.append(neighbor)
            self._visited.add(neighbor)
            # x >= y inside the octant, so x is the larger coordinate
            self._max_coord = max(self._max_coord, neighbor[0])

    def step(self) -> Snapshot:
        """Run one round and return its snapshot.

        Raises :class:`ExplorerFinishedError` if the run already finished.
        """
        if self._state is ExplorerState.DONE:
            raise ExplorerFinishedError(
                f"search for target={self._target} finished after {self._rounds} rounds"
            )
        self._state = ExplorerState.RUNNING
        limit = self._batch_limit
        good: list[Point] = []
        bad: list[Point] = []
        processed = 0
        while self._queue and (limit is None or processed < limit):
            point = self._queue.popleft()
            processed += 1
            if is_good(point, self._target, self._oracle):
                good.append(point)
                self._enqueue_neighbors(point)
            else:
                bad.append(point)

        self._rounds += 1
        final = not self._queue
        if final:
            self._state = ExplorerState.DONE
        else:
            self._batch_limit = self._pacing.next_limit(len(self._queue))
            self._state = ExplorerState.YIELDING

        logger.debug(
            "round %d: processed=%d good=%d bad=%d queued=%d next_limit=%s",
            self._rounds,
            processed,
            len(good),
            len(bad),
            len(self._queue),
            self._batch_limit,
        )
        if final:
            logger.info(
                "search target=%d finished in %d rounds (visited=%d, max=%d)",
                self._target,
                self._rounds,
                len(self._visited),
                self._max_coord,
            )

        return Snapshot(
            good=expand_octant(good),
            bad=expand_octant(bad),
            waiting=expand_octant(self._queue),
            max_coord=self._max_coord,
            round_index=self._rounds,
            final=final,
        )

    def resume(self) -> Snapshot:
        """Alias of :meth:`step` for consumers that drive the search as a coroutine."""
        return self.step()

    def __iter__(self) -> Iterator[Snapshot]:
        return self

    def __next__(self) -> Snapshot:
        if self._state is ExplorerState.DONE:
            raise StopIteration
        return self.step()
