"""Centralized domain constants for Life simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

SEED_X_RANGE: tuple[int, int] = (-50, 50)
"""Half-open horizontal range ``[start, stop)`` filled by the random seed generator."""

SEED_Y_RANGE: tuple[int, int] = (-20, 20)
"""Half-open vertical range ``[start, stop)`` filled by the random seed generator."""

SEED_DENSITY = 0.5
"""Probability that a cell inside the seed box starts alive."""

NEIGHBORHOOD_SIZE = 8
"""Number of cells in a Moore neighborhood."""

NUM_GENERATIONS = 200
"""Default number of generations per simulation run."""

HALT_WINDOW = 10
"""Default halt-detector window (consecutive unchanged generations)."""

SHORT_PERIOD_MAX = 2
"""Longest oscillator period reported by the short-period detector by default."""

VIEWPORT_WIDTH = 100
"""Default viewport width in cells (matches the seed box width)."""

VIEWPORT_HEIGHT = 40
"""Default viewport height in cells (matches the seed box height)."""

FLUSH_THRESHOLD = 8_192
"""Flush generation log rows to Parquet once this in-memory row count is reached."""

LIVE_GLYPH = "#"
"""Text glyph for a live cell in terminal frames."""

DEAD_GLYPH = "."
"""Text glyph for a dead cell in terminal frames."""
