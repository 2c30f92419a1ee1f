"""Tests for viv.viz.viewport module."""

from __future__ import annotations

import numpy as np
import pytest

from viv.config.types import ViewportConfig
from viv.domain.grid import Grid
from viv.domain.index import Index
from viv.viz.theme import PAPER_THEME
from viv.viz.viewport import Viewport

BLINKER = Grid.new([Index(-1, 0), Index(0, 0), Index(1, 0)])


class TestViewportBounds:
    def test_odd_size_is_centered(self) -> None:
        assert Viewport(5, 3).bounds() == (-2, 3, -1, 2)

    def test_even_size_covers_exact_width(self) -> None:
        min_x, stop_x, min_y, stop_y = Viewport(4, 2).bounds()
        assert (min_x, stop_x, min_y, stop_y) == (-2, 2, -1, 1)
        assert stop_x - min_x == 4

    def test_default_config_matches_seed_box(self) -> None:
        assert Viewport.from_config(ViewportConfig()).bounds() == (-50, 50, -20, 20)

    def test_scrolled(self) -> None:
        viewport = Viewport(3, 3).scrolled(dx=10, dy=-4)
        assert viewport.center == Index(10, -4)
        assert viewport.bounds() == (9, 12, -5, -2)

    def test_invalid_dimensions(self) -> None:
        with pytest.raises(ValueError, match="viewport dimensions must be >= 1"):
            Viewport(0, 3)


class TestViewportText:
    def test_rows_ascend_in_y(self) -> None:
        column = BLINKER.tick()
        grid = Grid.new(list(column) + [Index(1, 1)])
        assert Viewport(3, 3).rows(grid, "#", ".") == [".#.", ".#.", ".##"]

    def test_render_text(self) -> None:
        assert Viewport(3, 3).render_text(BLINKER) == "...\n###\n..."

    def test_render_text_with_theme(self) -> None:
        text = Viewport(3, 1).render_text(BLINKER, theme=PAPER_THEME)
        assert text == PAPER_THEME.live_glyph * 3

    def test_rendering_does_not_change_grid(self) -> None:
        before = BLINKER.living()
        Viewport(9, 9).render_text(BLINKER)
        assert BLINKER.living() == before


class TestViewportArray:
    def test_shape_and_cells(self) -> None:
        cells = Viewport(3, 3).to_array(BLINKER)
        assert cells.shape == (3, 3)
        assert cells.dtype == bool
        assert np.array_equal(cells[1], [True, True, True])
        assert cells.sum() == 3

    def test_cells_outside_window_are_clipped(self) -> None:
        grid = Grid.new([Index(0, 0), Index(100, 100)])
        assert Viewport(3, 3).to_array(grid).sum() == 1

    def test_matches_text_rows(self) -> None:
        grid = Grid.new([Index(-2, -1), Index(1, 0), Index(2, 1)])
        viewport = Viewport(5, 3)
        cells = viewport.to_array(grid)
        rows = viewport.rows(grid, "#", ".")
        for r, row in enumerate(rows):
            assert [ch == "#" for ch in row] == cells[r].tolist()
