"""Visualization layer: viewports, themes, renderers, and CLI."""

from viv.viz.cli import main
from viv.viz.render import render_filmstrip, render_frame, render_metric_timeseries
from viv.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)
from viv.viz.viewport import Viewport

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "Viewport",
    "get_theme",
    "main",
    "render_filmstrip",
    "render_frame",
    "render_metric_timeseries",
]
