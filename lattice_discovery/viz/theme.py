"""Visualization theme presets for snapshot renderers.

Themes are frozen dataclasses grouping the styling of the three point
classes (good, bad, waiting) together with the axes and background colours.
Renderers accept a ``Theme`` instance; the CLI picks one by name via
``--theme``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    title: str = "Visual Map"

    # Point classes
    good_color: str = "green"
    bad_color: str = "red"
    waiting_color: str = "gray"
    good_marker: str = "s"
    bad_marker: str = "x"
    waiting_marker: str = "s"
    good_label: str = "valid point"
    bad_label: str = "invalid point"
    waiting_label: str = "checking point"

    # Canvas
    background_color: str = "#FFFFFF"
    empty_cell_color: str = "#F0F0F0"
    text_color: str = "black"

    def class_colors(self) -> tuple[str, str, str, str]:
        """Colours indexed by grid class: empty, good, bad, waiting."""
        return (self.empty_cell_color, self.good_color, self.bad_color, self.waiting_color)


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    good_color="#4CAF50",
    bad_color="#FF5722",
    waiting_color="#9E9E9E",
    background_color="#1A1A1A",
    empty_cell_color="#1A1A1A",
    text_color="white",
)

PAPER_THEME = Theme(
    title="",
    good_color="#2ca02c",
    bad_color="#d62728",
    waiting_color="#7f7f7f",
    empty_cell_color="#FFFFFF",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
