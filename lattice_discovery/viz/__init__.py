"""Visualization subpackage: snapshot-stream renderers and themes."""

from lattice_discovery.viz.render import (
    AxisSpec,
    axis_ranges,
    build_cost_grid,
    render_final_map,
    render_search_animation,
)
from lattice_discovery.viz.theme import DEFAULT_THEME, Theme, get_theme

__all__ = [
    "AxisSpec",
    "DEFAULT_THEME",
    "Theme",
    "axis_ranges",
    "build_cost_grid",
    "get_theme",
    "render_final_map",
    "render_search_animation",
]
