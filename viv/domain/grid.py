"""Sparse, unbounded Life grid.

Only live cells are stored; every index absent from the live set is dead, so
memory grows with population rather than with any bounding box.

Transition invariant: :meth:`Grid.tick` counts neighbors against the
pre-tick live set only. The successor is built in a separate copy and the
receiver is never touched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from random import Random

from viv.config.types import SeedConfig
from viv.domain.index import Index


class Grid:
    """An infinite, two-dimensional, orthogonal grid of square cells."""

    __slots__ = ("_living",)

    def __init__(self, seed: Iterable[Index] = ()) -> None:
        self._living: set[Index] = set(seed)

    @classmethod
    def new(cls, seed: Iterable[Index]) -> Grid:
        """Create a grid whose live cells are exactly the distinct indices in ``seed``."""
        return cls(seed)

    @classmethod
    def generate(cls, rng: Random | None = None, config: SeedConfig | None = None) -> Grid:
        """Create a grid with a pseudo-random population near the origin.

        Every cell in the seed box is independently alive with probability
        ``config.density``. This is a convenience seed, not an entropy source;
        pass ``rng`` for reproducible seeds.
        """
        seed_config = config or SeedConfig()
        rng = rng or Random()
        x_start, x_stop = seed_config.x_range
        y_start, y_stop = seed_config.y_range
        return cls(
            Index(x, y)
            for x in range(x_start, x_stop)
            for y in range(y_start, y_stop)
            if rng.random() < seed_config.density
        )

    @staticmethod
    def origin() -> Index:
        """Alias for :meth:`Index.origin`."""
        return Index.origin()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_living(self, index: Index) -> bool:
        return index in self._living

    def living_neighbors(self, index: Index) -> int:
        """Number of live cells among the eight neighbors of ``index``."""
        living = self._living
        return sum(1 for neighbor in index.neighbors() if neighbor in living)

    def living(self) -> frozenset[Index]:
        """Immutable snapshot of the live set."""
        return frozenset(self._living)

    @property
    def population(self) -> int:
        return len(self._living)

    def bounding_box(self) -> tuple[int, int, int, int] | None:
        """Return ``(min_x, max_x, min_y, max_y)`` over live cells, or None when empty."""
        if not self._living:
            return None
        xs = [index.x for index in self._living]
        ys = [index.y for index in self._living]
        return min(xs), max(xs), min(ys), max(ys)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def kill(self, index: Index) -> None:
        self._living.discard(index)

    def unkill(self, index: Index) -> None:
        self._living.add(index)

    def copy(self) -> Grid:
        return Grid(self._living)

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------

    def tick(self) -> Grid:
        """Return the next generation; this grid is left unmodified.

        Rules:
        1) Living cells with fewer than two living neighbors die.
        2) Living cells with two or three living neighbors live on.
        3) Living cells with more than three living neighbors die.
        4) Dead cells with exactly three living neighbors become living cells.
        """
        successor = self.copy()
        for index in self._living:
            count = self.living_neighbors(index)
            if count < 2 or count > 3:
                successor.kill(index)

        # Only dead cells next to a live cell can have three live neighbors.
        candidates = {
            neighbor for index in self._living for neighbor in index.neighbors()
        } - self._living
        for index in candidates:
            if self.living_neighbors(index) == 3:
                successor.unkill(index)
        return successor

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, index: object) -> bool:
        return index in self._living

    def __iter__(self) -> Iterator[Index]:
        return iter(self._living)

    def __len__(self) -> int:
        return len(self._living)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._living == other._living

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(population={len(self._living)})"
