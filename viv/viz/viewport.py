"""Rectangular windows onto the unbounded grid.

A viewport only reads ``Grid.is_living``; it never advances or edits the
grid. Rows are emitted with ``y`` ascending and columns with ``x``
ascending.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from viv.config.types import ViewportConfig
from viv.domain.grid import Grid
from viv.domain.index import Index
from viv.viz.theme import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class Viewport:
    """A ``width`` x ``height`` window of cells centered on ``center``."""

    width: int
    height: int
    center: Index = field(default_factory=Index.origin)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("viewport dimensions must be >= 1")

    @classmethod
    def from_config(cls, config: ViewportConfig, center: Index | None = None) -> Viewport:
        return cls(width=config.width, height=config.height, center=center or Index.origin())

    def bounds(self) -> tuple[int, int, int, int]:
        """Return half-open ``(min_x, stop_x, min_y, stop_y)`` covering exactly the window.

        For odd sizes the center cell is in the middle; for even sizes it sits
        just right of (or above) the middle.
        """
        min_x = self.center.x - self.width // 2
        min_y = self.center.y - self.height // 2
        return min_x, min_x + self.width, min_y, min_y + self.height

    def scrolled(self, dx: int = 0, dy: int = 0) -> Viewport:
        """Return a viewport moved by ``(dx, dy)`` cells."""
        return Viewport(self.width, self.height, Index(self.center.x + dx, self.center.y + dy))

    def indices(self) -> list[list[Index]]:
        min_x, stop_x, min_y, stop_y = self.bounds()
        return [[Index(x, y) for x in range(min_x, stop_x)] for y in range(min_y, stop_y)]

    def rows(self, grid: Grid, live_glyph: str, dead_glyph: str) -> list[str]:
        return [
            "".join(live_glyph if grid.is_living(index) else dead_glyph for index in row)
            for row in self.indices()
        ]

    def render_text(self, grid: Grid, theme: Theme = DEFAULT_THEME) -> str:
        return "\n".join(self.rows(grid, theme.live_glyph, theme.dead_glyph))

    def to_array(self, grid: Grid) -> np.ndarray:
        """Return a ``(height, width)`` boolean array; row 0 is the smallest ``y``."""
        min_x, stop_x, min_y, stop_y = self.bounds()
        cells = np.zeros((self.height, self.width), dtype=bool)
        # Visit live cells rather than the window so cost tracks population.
        for index in grid:
            if min_x <= index.x < stop_x and min_y <= index.y < stop_y:
                cells[index.y - min_y, index.x - min_x] = True
        return cells
