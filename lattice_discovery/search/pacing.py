"""Batch pacing policies for the snapshot protocol.

A round stops after processing ``batch_limit`` points or when the frontier
empties. After a partial round the policy picks the next round's limit from
the frontier size at that moment. ``None`` means unbounded: the next round
drains the queue. Pacing only shapes how output is chunked; the set of
classified points is identical under every policy.
"""

from __future__ import annotations

from dataclasses import dataclass

from lattice_discovery.config.constants import DEFAULT_FIXED_BATCH_SIZE, PACING_NAMES


class PacingPolicy:
    """Base class: decides the next round's batch limit."""

    name = "base"

    def next_limit(self, queue_length: int) -> int | None:
        raise NotImplementedError

    @staticmethod
    def from_name(name: str, batch_size: int = DEFAULT_FIXED_BATCH_SIZE) -> PacingPolicy:
        """Build a policy from its CLI/config name."""
        if name == "frontier":
            return FrontierPacing()
        if name == "drain":
            return DrainPacing()
        if name == "fixed":
            return FixedPacing(size=batch_size)
        raise ValueError(f"pacing must be one of {', '.join(PACING_NAMES)}")


class FrontierPacing(PacingPolicy):
    """Next limit is the queue length left behind, giving layer-by-layer rounds."""

    name = "frontier"

    def next_limit(self, queue_length: int) -> int | None:
        return max(1, queue_length)


class DrainPacing(PacingPolicy):
    """Every round after the first drains the whole frontier."""

    name = "drain"

    def next_limit(self, queue_length: int) -> int | None:
        return None


@dataclass(frozen=True)
class FixedPacing(PacingPolicy):
    """Constant chunk size regardless of frontier growth."""

    size: int = DEFAULT_FIXED_BATCH_SIZE
    name = "fixed"

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("batch size must be >= 1")

    def next_limit(self, queue_length: int) -> int | None:
        return self.size
