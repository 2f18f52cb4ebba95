"""Typed domain model for lattice points and per-round search snapshots.

Points are plain ``(x, y)`` integer tuples: immutable, compared and hashed by
value, which also makes them collision-free keys for the visited set.
A ``Snapshot`` carries full-plane coordinates only; the explorer's internal
queue and visited set stay restricted to the canonical octant.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Point = tuple[int, int]
"""A lattice point ``(x, y)``."""


class ExplorerState(Enum):
    """Lifecycle of a frontier explorer."""

    RUNNING = "running"
    YIELDING = "yielding"
    DONE = "done"


@dataclass(frozen=True)
class Snapshot:
    """Reflected view of one round's discoveries plus the remaining frontier."""

    good: tuple[Point, ...]
    bad: tuple[Point, ...]
    waiting: tuple[Point, ...]
    max_coord: int
    round_index: int
    final: bool = False
    """True only for the terminal snapshot of a run."""

    def counts(self) -> dict[str, int]:
        return {"good": len(self.good), "bad": len(self.bad), "waiting": len(self.waiting)}
