"""Configuration layer: constants and typed config dataclasses."""

from lattice_discovery.config.constants import (
    DEFAULT_FIXED_BATCH_SIZE,
    DEFAULT_FPS,
    DEFAULT_INITIAL_MAX,
    DEFAULT_PACING,
    DEFAULT_TARGET,
    INITIAL_BATCH_LIMIT,
    NEIGHBOR_OFFSETS,
    ORIGIN,
    PACING_NAMES,
)
from lattice_discovery.config.types import (
    ExplorerConfig,
    RenderConfig,
    require_non_negative_int,
)

__all__ = [
    "DEFAULT_FIXED_BATCH_SIZE",
    "DEFAULT_FPS",
    "DEFAULT_INITIAL_MAX",
    "DEFAULT_PACING",
    "DEFAULT_TARGET",
    "ExplorerConfig",
    "INITIAL_BATCH_LIMIT",
    "NEIGHBOR_OFFSETS",
    "ORIGIN",
    "PACING_NAMES",
    "RenderConfig",
    "require_non_negative_int",
]
