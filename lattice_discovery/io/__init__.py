"""Output-path helpers for renderers and the CLI."""

from lattice_discovery.io.paths import animation_path, final_map_path, resolve_within_base

__all__ = ["animation_path", "final_map_path", "resolve_within_base"]
