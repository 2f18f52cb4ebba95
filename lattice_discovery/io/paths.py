"""Path construction and containment helpers for rendered output.

Centralises the file naming conventions used by the CLI when no explicit
output path is given.
"""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve an output *path* against *base_dir* and keep it inside.

    Relative paths are joined onto *base_dir*; absolute ones must already
    point inside it. Raises :exc:`ValueError` otherwise.
    """
    base = Path(base_dir).resolve()
    resolved = (base / path).resolve()
    if not resolved.is_relative_to(base):
        raise ValueError(f"Output path escapes base_dir {base}: {path}")
    return resolved


def animation_path(out_dir: Path, target: int, suffix: str = ".gif") -> Path:
    """Return path of the search animation for *target*."""
    return out_dir / f"frontier_t{target}{suffix}"


def final_map_path(out_dir: Path, target: int, suffix: str = ".png") -> Path:
    """Return path of the static map of a finished search for *target*."""
    return out_dir / f"map_t{target}{suffix}"
