"""Configuration dataclasses and result containers for Life simulations.

All frozen dataclasses that parameterise seeding, simulation runs and
viewports live here.
"""

from __future__ import annotations

from dataclasses import dataclass

from viv.config.constants import (
    HALT_WINDOW,
    NUM_GENERATIONS,
    SEED_DENSITY,
    SEED_X_RANGE,
    SEED_Y_RANGE,
    SHORT_PERIOD_MAX,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)

__all__ = [
    "SimulationResult",
    "SeedConfig",
    "RunConfig",
    "ViewportConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one simulation run."""

    run_id: str
    generations_run: int
    final_population: int
    terminated_at: int | None
    termination_reason: str | None

    @property
    def survived(self) -> bool:
        return self.termination_reason is None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SeedConfig:
    """Bounding box and density for the randomized seed generator."""

    x_range: tuple[int, int] = SEED_X_RANGE
    y_range: tuple[int, int] = SEED_Y_RANGE
    density: float = SEED_DENSITY

    def __post_init__(self) -> None:
        if self.x_range[0] > self.x_range[1]:
            raise ValueError("x_range start must be <= stop")
        if self.y_range[0] > self.y_range[1]:
            raise ValueError("y_range start must be <= stop")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError("density must be in [0.0, 1.0]")

    @classmethod
    def centered(cls, width: int, height: int, density: float = SEED_DENSITY) -> SeedConfig:
        """Build a seed box of ``width`` x ``height`` cells centered on the origin."""
        if width < 0 or height < 0:
            raise ValueError("seed box dimensions must be >= 0")
        return cls(
            x_range=(-(width // 2), width - width // 2),
            y_range=(-(height // 2), height - height // 2),
            density=density,
        )

    @property
    def cell_count(self) -> int:
        return (self.x_range[1] - self.x_range[0]) * (self.y_range[1] - self.y_range[0])


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for one simulation run, including termination detectors."""

    generations: int = NUM_GENERATIONS
    halt_window: int = HALT_WINDOW
    short_period_max: int = SHORT_PERIOD_MAX
    enable_termination: bool = True

    def __post_init__(self) -> None:
        if self.generations < 1:
            raise ValueError("generations must be >= 1")
        if self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")
        if self.short_period_max < 2:
            raise ValueError("short_period_max must be >= 2")

    @property
    def short_period_history_size(self) -> int:
        return self.short_period_max * 2


@dataclass(frozen=True)
class ViewportConfig:
    """Size of the rectangular window rendered by front-ends."""

    width: int = VIEWPORT_WIDTH
    height: int = VIEWPORT_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("viewport dimensions must be >= 1")
