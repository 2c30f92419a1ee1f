"""Visualization theme presets for text and image renderers.

Themes are frozen dataclasses that group all styling constants together.
Renderers accept a ``Theme`` instance, and the ``--theme`` CLI argument
selects one of the registered presets by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from viv.config.constants import DEAD_GLYPH, LIVE_GLYPH


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Per-metric display
    metric_labels: dict[str, str] = field(default_factory=dict)
    metric_colors: dict[str, str] = field(default_factory=dict)

    # Cell grid
    live_glyph: str = LIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH
    live_cell_color: str = "#F5F5F5"
    dead_cell_color: str = "#1A1A1A"
    grid_line_color: str = "#333333"
    background_color: str = "#0D0D0D"
    text_color: str = "white"


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

_DEFAULT_METRIC_LABELS: dict[str, str] = {
    "population": "Population",
    "births": "Births",
    "deaths": "Deaths",
    "cluster_count": "Cluster Count",
}

DEFAULT_THEME = Theme(
    metric_labels=_DEFAULT_METRIC_LABELS,
    metric_colors={
        "population": "tab:blue",
        "births": "tab:green",
        "deaths": "tab:red",
        "cluster_count": "tab:purple",
    },
)

PAPER_THEME = Theme(
    metric_labels=_DEFAULT_METRIC_LABELS,
    metric_colors={
        "population": "#1f77b4",
        "births": "#2ca02c",
        "deaths": "#d62728",
        "cluster_count": "#9467bd",
    },
    live_glyph="◼",
    dead_glyph="◻",
    live_cell_color="#000000",
    dead_cell_color="#FFFFFF",
    grid_line_color="#E0E0E0",
    background_color="#FFFFFF",
    text_color="black",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
