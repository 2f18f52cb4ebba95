"""Centralized constants for lattice frontier searches.

Defaults shared by the explorer, the driver helpers, the renderers and the
CLI are defined here. Consuming modules should import from this module rather
than defining their own inline literals.
"""

from __future__ import annotations

DEFAULT_TARGET = 25
"""Default digit-sum threshold for a search run."""

DEFAULT_INITIAL_MAX = 0
"""Default starting value for the reported maximum coordinate."""

INITIAL_BATCH_LIMIT = 1
"""Batch limit of the first round (only the origin is queued)."""

ORIGIN: tuple[int, int] = (0, 0)
"""Seed point of every search."""

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Axis-aligned neighbor offsets, in the order neighbors are enqueued."""

PACING_NAMES: tuple[str, ...] = ("frontier", "drain", "fixed")
"""Names accepted by ``PacingPolicy.from_name``."""

DEFAULT_PACING = "frontier"
"""Pacing policy used when none is configured."""

DEFAULT_FIXED_BATCH_SIZE = 64
"""Chunk size used by the ``fixed`` pacing policy when none is given."""

DEFAULT_FPS = 8
"""Default frames per second for search animations."""

DEFAULT_FIGURE_WIDTH = 6.0
"""Default figure width in inches."""

DEFAULT_FIGURE_HEIGHT = 6.0
"""Default figure height in inches."""

DEFAULT_DPI = 100
"""Default resolution for rendered figures."""
