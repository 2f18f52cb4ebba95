"""Configuration dataclasses for search and render runs.

All frozen dataclasses that parameterise an explorer run or a rendering pass
live here. Each validates itself in ``__post_init__`` so an invalid
configuration never reaches the engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from lattice_discovery.config.constants import (
    DEFAULT_DPI,
    DEFAULT_FIGURE_HEIGHT,
    DEFAULT_FIGURE_WIDTH,
    DEFAULT_FIXED_BATCH_SIZE,
    DEFAULT_FPS,
    DEFAULT_INITIAL_MAX,
    DEFAULT_PACING,
    DEFAULT_TARGET,
    PACING_NAMES,
)

__all__ = [
    "ExplorerConfig",
    "RenderConfig",
    "require_non_negative_int",
]


def require_non_negative_int(value: object, name: str) -> int:
    """Return *value* if it is a non-negative ``int``.

    Booleans are rejected even though they subclass ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return value


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExplorerConfig:
    """Parameters of one frontier search run."""

    target: int = DEFAULT_TARGET
    initial_max: int = DEFAULT_INITIAL_MAX
    pacing: str = DEFAULT_PACING
    batch_size: int = DEFAULT_FIXED_BATCH_SIZE
    """Chunk size, only used by the ``fixed`` pacing policy."""
    max_rounds: int | None = None
    """Optional cap on rounds enforced by the driver helpers."""

    def __post_init__(self) -> None:
        require_non_negative_int(self.target, "target")
        require_non_negative_int(self.initial_max, "initial_max")
        if self.pacing not in PACING_NAMES:
            raise ValueError(f"pacing must be one of {', '.join(PACING_NAMES)}")
        if self.batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        if self.max_rounds is not None and self.max_rounds < 1:
            raise ValueError("max_rounds must be >= 1")


@dataclass(frozen=True)
class RenderConfig:
    """Settings for turning a snapshot stream into figures."""

    fps: int = DEFAULT_FPS
    keep_bad: bool = False
    """Accumulate rejected points across rounds instead of showing only the latest."""
    width: float = DEFAULT_FIGURE_WIDTH
    height: float = DEFAULT_FIGURE_HEIGHT
    dpi: int = DEFAULT_DPI

    def __post_init__(self) -> None:
        if self.fps < 1:
            raise ValueError("fps must be >= 1")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("figure dimensions must be > 0")
        if self.dpi < 1:
            raise ValueError("dpi must be >= 1")
