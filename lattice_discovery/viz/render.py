"""Matplotlib-based rendering of frontier-search snapshot streams.

The renderers are pure consumers: they pull snapshots one at a time from an
explorer (or any snapshot iterable) and never reach into search state.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import animation
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from lattice_discovery.config.types import RenderConfig
from lattice_discovery.domain.snapshot import Point, Snapshot
from lattice_discovery.io.paths import resolve_within_base as _resolve_within_base
from lattice_discovery.search.driver import (
    RoundLimitExceededError,
    SearchResult,
    SnapshotAccumulator,
)
from lattice_discovery.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

EMPTY, GOOD, BAD, WAITING = 0, 1, 2, 3
"""Cell classes of :func:`build_cost_grid`."""


@dataclass(frozen=True)
class AxisSpec:
    """Axis ranges, marker size and tick spacing for one frame."""

    x_range: tuple[int, int]
    y_range: tuple[int, int]
    point_size: int
    dtick: int


def axis_ranges(max_coord: int, width: int, height: int) -> AxisSpec:
    """Symmetric axis ranges covering ``max_coord``, widened along the longer side.

    The shorter axis spans ``max_coord + 1`` either side of the origin; the
    longer one spans ``max_coord`` stretched by the canvas aspect ratio, and
    never less than the shorter one.
    """
    if width < 1 or height < 1:
        raise ValueError("canvas dimensions must be >= 1")
    ratio = width / height
    small = max_coord + 1
    big = max(small, math.ceil(max_coord * (ratio if ratio > 1 else 1 / ratio)))
    x_range, y_range = (-big, big), (-small, small)
    if ratio < 1:
        x_range, y_range = y_range, x_range
    return AxisSpec(
        x_range=x_range,
        y_range=y_range,
        point_size=max(width // x_range[1] // 2, 1),
        dtick=max(x_range[1] // 20, y_range[1] // 20, 1),
    )


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def build_cost_grid(
    good: Iterable[Point],
    bad: Iterable[Point],
    waiting: Iterable[Point],
    max_coord: int,
) -> np.ndarray:
    """Return a ``(2m+1, 2m+1)`` class grid centred on the origin, y pointing up.

    Later classes overwrite earlier ones in the order waiting, bad, good.
    Points beyond ``max_coord`` are silently skipped.
    """
    size = 2 * max_coord + 1
    grid = np.full((size, size), EMPTY, dtype=int)
    for points, value in ((waiting, WAITING), (bad, BAD), (good, GOOD)):
        for x, y in points:
            if abs(x) <= max_coord and abs(y) <= max_coord:
                grid[max_coord - y, x + max_coord] = value
    return grid


def _class_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 4-colour colormap (empty, good, bad, waiting)."""
    cmap = ListedColormap(list(theme.class_colors()))
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5, 3.5], cmap.N)
    return cmap, norm


def _build_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=theme.good_color, edgecolor="gray", label=theme.good_label),
        Patch(facecolor=theme.bad_color, edgecolor="gray", label=theme.bad_label),
        Patch(facecolor=theme.waiting_color, edgecolor="gray", label=theme.waiting_label),
    ]


def _offsets(points: tuple[Point, ...]) -> np.ndarray:
    if not points:
        return np.empty((0, 2))
    return np.asarray(points, dtype=float)


def _resolve_output(output_path: Path, base_dir: Path | None) -> Path:
    if base_dir is None:
        return Path(output_path).resolve()
    return _resolve_within_base(Path(output_path), Path(base_dir))


# ---------------------------------------------------------------------------
# render_search_animation
# ---------------------------------------------------------------------------


def _pull_frames(
    snapshots: Iterable[Snapshot], keep_bad: bool, max_rounds: int | None
) -> list[tuple[tuple[Point, ...], tuple[Point, ...], tuple[Point, ...], int, str]]:
    """Accumulate the stream into per-frame (good, bad, waiting, max, caption) tuples."""
    accumulator = SnapshotAccumulator(keep_bad=keep_bad)
    frames = []
    for snapshot in snapshots:
        accumulator.add(snapshot)
        frames.append(
            (
                accumulator.good,
                accumulator.shown_bad,
                accumulator.waiting,
                accumulator.max_coord,
                accumulator.counts_message(),
            )
        )
        if accumulator.finished:
            break
        if max_rounds is not None and accumulator.rounds >= max_rounds:
            raise RoundLimitExceededError(f"search did not finish within {max_rounds} rounds")
    if not frames:
        raise ValueError("snapshot stream is empty")
    return frames


def render_search_animation(
    snapshots: Iterable[Snapshot],
    output_path: Path,
    config: RenderConfig | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
    max_rounds: int | None = None,
) -> int:
    """Pull every snapshot of a run and write one animation frame per round.

    *snapshots* is usually a :class:`FrontierExplorer`. ``.gif`` outputs use
    the Pillow writer, anything else FFMpeg. Returns the number of frames.
    """
    config = config or RenderConfig()
    output_path = _resolve_output(output_path, base_dir)
    frames = _pull_frames(snapshots, keep_bad=config.keep_bad, max_rounds=max_rounds)

    width_px = int(config.width * config.dpi)
    height_px = int(config.height * config.dpi)
    fig, ax = plt.subplots(figsize=(config.width, config.height), dpi=config.dpi)
    fig.patch.set_facecolor(theme.background_color)
    ax.set_facecolor(theme.background_color)
    ax.set_aspect("equal")
    if theme.title:
        ax.set_title(theme.title, color=theme.text_color)

    artists: list[Any] = []
    for color, marker, label in (
        (theme.waiting_color, theme.waiting_marker, theme.waiting_label),
        (theme.bad_color, theme.bad_marker, theme.bad_label),
        (theme.good_color, theme.good_marker, theme.good_label),
    ):
        artists.append(ax.scatter([], [], c=color, marker=marker, label=label, s=4))
    caption = ax.text(
        0.01, 0.01, "", transform=ax.transAxes, fontsize=8, color=theme.text_color
    )

    def update(frame_index: int) -> tuple[Any, ...]:
        good, bad, waiting, max_coord, message = frames[frame_index]
        axes = axis_ranges(max_coord, width_px, height_px)
        ax.set_xlim(*axes.x_range)
        ax.set_ylim(*axes.y_range)
        marker_area = float(axes.point_size**2)
        for artist, points in zip(artists, (waiting, bad, good), strict=True):
            artist.set_offsets(_offsets(points))
            artist.set_sizes([marker_area])
        caption.set_text(message)
        return (*artists, caption)

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(frames),
        interval=max(1, int(1000 / config.fps)),
        blit=False,
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer: animation.PillowWriter | animation.FFMpegWriter
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=config.fps)
    else:
        writer = animation.FFMpegWriter(fps=config.fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
    logger.info("wrote %d frames to %s", len(frames), output_path)
    return len(frames)


# ---------------------------------------------------------------------------
# render_final_map
# ---------------------------------------------------------------------------


def render_final_map(
    result: SearchResult,
    output_path: Path,
    config: RenderConfig | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Render the classification of a finished search as a static cell map."""
    config = config or RenderConfig()
    output_path = _resolve_output(output_path, base_dir)

    extent = max(result.max_coord, 1)
    grid = build_cost_grid(result.good, result.bad, (), extent)
    cmap, norm = _class_cmap(theme)

    fig, ax = plt.subplots(figsize=(config.width, config.height), dpi=config.dpi)
    fig.patch.set_facecolor(theme.background_color)
    ax.imshow(
        grid,
        cmap=cmap,
        norm=norm,
        origin="upper",
        aspect="equal",
        extent=(-extent - 0.5, extent + 0.5, -extent - 0.5, extent + 0.5),
    )
    title = theme.title or "Digit-sum region"
    ax.set_title(
        f"{title} (target={result.target}, {len(result.good)} points)", color=theme.text_color
    )
    fig.legend(
        handles=_build_legend_handles(theme)[:2],
        loc="lower center",
        ncol=2,
        fontsize=8,
        frameon=False,
        labelcolor=theme.text_color,
    )
    fig.tight_layout(rect=(0, 0.06, 1, 1))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=config.dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info("wrote map for target=%d to %s", result.target, output_path)
