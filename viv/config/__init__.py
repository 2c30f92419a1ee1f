"""Configuration layer: constants and typed config dataclasses."""

from viv.config.constants import (
    DEAD_GLYPH,
    FLUSH_THRESHOLD,
    HALT_WINDOW,
    LIVE_GLYPH,
    NEIGHBORHOOD_SIZE,
    NUM_GENERATIONS,
    SEED_DENSITY,
    SEED_X_RANGE,
    SEED_Y_RANGE,
    SHORT_PERIOD_MAX,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from viv.config.types import (
    RunConfig,
    SeedConfig,
    SimulationResult,
    ViewportConfig,
)

__all__ = [
    "DEAD_GLYPH",
    "FLUSH_THRESHOLD",
    "HALT_WINDOW",
    "LIVE_GLYPH",
    "NEIGHBORHOOD_SIZE",
    "NUM_GENERATIONS",
    "RunConfig",
    "SEED_DENSITY",
    "SEED_X_RANGE",
    "SEED_Y_RANGE",
    "SHORT_PERIOD_MAX",
    "SeedConfig",
    "SimulationResult",
    "VIEWPORT_HEIGHT",
    "VIEWPORT_WIDTH",
    "ViewportConfig",
]
